"""Employees and addresses copied through copy-constructors or clone()."""
from abc import ABC, abstractmethod
from typing import TypeVar

from src.domain.base.entity import Record

T = TypeVar('T', bound='Prototype')


class Prototype(ABC):
    """Something that can produce an independent deep copy of itself."""

    @abstractmethod
    def clone(self: T) -> T:
        """Return a deep copy sharing no mutable state with self."""


class Address(Record, Prototype):
    street_address: str
    city: str

    @classmethod
    def copy_from(cls, other: 'Address') -> 'Address':
        """Copy-constructor."""
        return cls(street_address=other.street_address, city=other.city)

    def clone(self) -> 'Address':
        return type(self).copy_from(self)

    def __str__(self) -> str:
        return f"{self.street_address}, {self.city}"


class Employee(Record, Prototype):
    name: str
    address: Address

    @classmethod
    def copy_from(cls, other: 'Employee') -> 'Employee':
        """Copy-constructor; the address is copied too, never shared."""
        return cls(name=other.name, address=Address.copy_from(other.address))

    def clone(self) -> 'Employee':
        return type(self)(name=self.name, address=self.address.clone())

    def __str__(self) -> str:
        return f"My name is {self.name} and I live at {self.address}"
