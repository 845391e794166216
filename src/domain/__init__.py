"""
Domain Layer - one bounded context per design pattern family

- core/: Shared exceptions
- base/: Shared base record
- builder/: Faceted builder and code builder
- factory/: Factory methods, person factory and the hot drink abstract factory
- prototype/: Copy-constructors and clone methods
- solid/: SOLID principle examples

The contexts are independent; none of them imports another.
"""

from .base import Record
from .core.exceptions import (
    ConfigurationError,
    DomainException,
    OutOfRangeError,
    ParseFailureError,
    ValidationError,
)

__all__ = [
    "Record",
    "DomainException",
    "ValidationError",
    "OutOfRangeError",
    "ParseFailureError",
    "ConfigurationError",
]
