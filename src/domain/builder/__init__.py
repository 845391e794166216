"""Builder bounded context."""

from .code_builder import CodeBuilder, CodeClass, Field
from .person import Person
from .person_builder import PersonAddressBuilder, PersonBuilder, PersonJobBuilder

__all__ = [
    "CodeBuilder",
    "CodeClass",
    "Field",
    "Person",
    "PersonAddressBuilder",
    "PersonBuilder",
    "PersonJobBuilder",
]
