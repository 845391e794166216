"""Liskov substitution: a Square that is not a well-behaved Rectangle.

Rectangle/Square is kept as the classic counter-example: code written
against Rectangle breaks when handed a Square. RectangleShape and
SquareShape show the alternative, two unrelated immutable variants with
the area computed per variant.
"""
from dataclasses import dataclass
from typing import Tuple, Union


class Rectangle:

    def __init__(self, width: int, height: int):
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        self._width = value

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: int) -> None:
        self._height = value

    @property
    def area(self) -> int:
        return self._width * self._height

    def __str__(self) -> str:
        return f"Width: {self.width}, height: {self.height}"


class Square(Rectangle):
    """Keeps both sides equal, which silently breaks Rectangle's contract."""

    def __init__(self, size: int):
        super().__init__(size, size)

    @Rectangle.width.setter
    def width(self, value: int) -> None:
        self._width = self._height = value

    @Rectangle.height.setter
    def height(self, value: int) -> None:
        self._width = self._height = value


def use_it(rc: Rectangle) -> Tuple[int, int]:
    """Set height to 10 and return (expected area, actual area)."""
    w = rc.width
    rc.height = 10
    expected = w * 10
    return expected, rc.area


@dataclass(frozen=True)
class RectangleShape:
    width: int
    height: int


@dataclass(frozen=True)
class SquareShape:
    side: int


Shape = Union[RectangleShape, SquareShape]


def area_of(shape: Shape) -> int:
    if isinstance(shape, RectangleShape):
        return shape.width * shape.height
    if isinstance(shape, SquareShape):
        return shape.side * shape.side
    raise TypeError(f"Unknown shape: {shape!r}")
