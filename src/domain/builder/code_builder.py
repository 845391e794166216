"""Fluent builder producing a textual class declaration."""
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Field:
    """A named, typed field of a class."""
    name: str
    type: str

    def __str__(self) -> str:
        return f"{self.name}: {self.type}"


@dataclass
class CodeClass:
    """A class declaration made of a name and an ordered list of fields."""
    name: str = ""
    fields: List[Field] = field(default_factory=list)

    def __str__(self) -> str:
        lines = [f"class {self.name} \n{{\n"]
        for f in self.fields:
            lines.append(f"{f}\n")
        lines.append("}\n")
        return "".join(lines)


class CodeBuilder:
    """Builds a CodeClass one field at a time."""

    def __init__(self, root_name: str):
        self._the_class = CodeClass(name=root_name)

    def add_field(self, name: str, type_name: str) -> 'CodeBuilder':
        self._the_class.fields.append(Field(name, type_name))
        return self

    def build(self) -> CodeClass:
        return self._the_class

    def __str__(self) -> str:
        return str(self._the_class)
