"""Dependency inversion: research depends on a browsing abstraction.

Research never touches the relationship storage; it only needs something
that can list the children of a person.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterator, List, Tuple

from src.domain.base.entity import Record


class Relationship(str, Enum):
    PARENT = "parent"
    CHILD = "child"
    SIBLING = "sibling"


class Person(Record):
    name: str


class RelationshipBrowser(ABC):

    @abstractmethod
    def find_all_children_of(self, name: str) -> Iterator[str]:
        pass


class Relationships(RelationshipBrowser):
    """Low-level module: stores (person, relationship, person) triples."""

    def __init__(self):
        self.relations: List[Tuple[Person, Relationship, Person]] = []

    def add_parent_and_child(self, parent: Person, child: Person) -> None:
        self.relations.append((parent, Relationship.PARENT, child))
        self.relations.append((child, Relationship.CHILD, parent))

    def find_all_children_of(self, name: str) -> Iterator[str]:
        for first, relation, second in self.relations:
            if first.name == name and relation == Relationship.PARENT:
                yield second.name


class Research:
    """High-level module: depends only on RelationshipBrowser."""

    def __init__(self, browser: RelationshipBrowser):
        self.browser = browser

    def children_of(self, name: str) -> List[str]:
        return list(self.browser.find_all_children_of(name))

    def report(self, name: str) -> List[str]:
        return [f"{name} has a child called {child}" for child in self.children_of(name)]
