# src/domain/core/exceptions.py
from typing import Any, Optional, List

class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass

class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details

class OutOfRangeError(DomainException, IndexError):
    """Raised when a selection index falls outside the available entries."""
    def __init__(self, index: int, size: int):
        super().__init__(f"Index {index} is out of range (0..{size - 1})")
        self.index = index
        self.size = size

class ParseFailureError(DomainException, ValueError):
    """Raised when user input cannot be parsed into the expected value."""
    def __init__(self, text: str, expected: str = "integer"):
        super().__init__(f"Cannot parse {text!r} as {expected}")
        self.text = text
        self.expected = expected

class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
