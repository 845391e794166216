"""Factory that hands out sequential ids."""
from src.domain.base.entity import Record


class Person(Record):
    id: int
    name: str

    def __str__(self) -> str:
        return f"id: {self.id}, name: {self.name}"


class PersonFactory:
    """Creates people numbered 1, 2, 3, ... in creation order."""

    def __init__(self):
        self._id = 0

    def create_person(self, name: str) -> Person:
        self._id += 1
        return Person(id=self._id, name=name)
