"""Lines whose endpoints are copied, not shared."""
from dataclasses import dataclass, field


@dataclass
class Point:
    x: int = 0
    y: int = 0


@dataclass
class Line:
    start: Point = field(default_factory=Point)
    end: Point = field(default_factory=Point)

    def deep_copy(self) -> 'Line':
        return Line(
            start=Point(self.start.x, self.start.y),
            end=Point(self.end.x, self.end.y),
        )

    def __str__(self) -> str:
        return (
            f"start x: {self.start.x}, start y: {self.start.y}\n"
            f"end x: {self.end.x}, end y: {self.end.y}"
        )
