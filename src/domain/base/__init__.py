"""Base domain layer - shared kernel for all bounded contexts."""

from .entity import Record

__all__ = ["Record"]
