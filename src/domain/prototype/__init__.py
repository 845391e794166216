"""Prototype bounded context."""

from .employee import Address, Employee, Prototype
from .line import Line, Point

__all__ = ["Address", "Employee", "Line", "Point", "Prototype"]
