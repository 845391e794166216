"""Open/closed principle: filtering products by composable specifications.

New criteria are added by writing a new Specification, never by editing
the filter.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, Iterable, List, TypeVar

from src.domain.base.entity import Record

T = TypeVar('T')


class Color(str, Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class Size(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    HUGE = "huge"


class Product(Record):
    name: str
    color: Color
    size: Size


class Specification(ABC, Generic[T]):
    """A criterion an item either satisfies or not."""

    @abstractmethod
    def is_satisfied(self, item: T) -> bool:
        pass

    def __and__(self, other: 'Specification[T]') -> 'AndSpecification[T]':
        return AndSpecification(self, other)


class ColorSpecification(Specification[Product]):

    def __init__(self, color: Color):
        self.color = color

    def is_satisfied(self, item: Product) -> bool:
        return item.color == self.color


class SizeSpecification(Specification[Product]):

    def __init__(self, size: Size):
        self.size = size

    def is_satisfied(self, item: Product) -> bool:
        return item.size == self.size


class AndSpecification(Specification[T]):
    """Satisfied when every wrapped specification is satisfied."""

    def __init__(self, *specs: Specification[T]):
        if len(specs) < 2:
            raise ValueError("AndSpecification needs at least two specifications")
        self.specs = specs

    def is_satisfied(self, item: T) -> bool:
        return all(spec.is_satisfied(item) for spec in self.specs)


class Filter(ABC, Generic[T]):

    @abstractmethod
    def filter(self, items: Iterable[T], spec: Specification[T]) -> List[T]:
        pass


class BetterFilter(Filter[T]):
    """Filter driven entirely by the specification it is given."""

    def filter(self, items: Iterable[T], spec: Specification[T]) -> List[T]:
        return [item for item in items if spec.is_satisfied(item)]


class ProductFilter:
    """The closed-for-extension alternative: one method per criterion.

    Every new criterion (or combination of criteria) needs a new method here.
    """

    def filter_by_color(self, products: Iterable[Product], color: Color) -> List[Product]:
        return [p for p in products if p.color == color]

    def filter_by_size(self, products: Iterable[Product], size: Size) -> List[Product]:
        return [p for p in products if p.size == size]

    def filter_by_size_and_color(self, products: Iterable[Product], size: Size,
                                 color: Color) -> List[Product]:
        return [p for p in products if p.size == size and p.color == color]
