"""Factory methods and an inner singleton factory for Point."""
import math
import threading
from typing import Optional


class Point:
    """
    A point in the plane.

    Build points through the named constructors rather than calling the
    class directly; the name says which coordinate system the arguments
    are in::

        Point.create_cartesian(1, 2)
        Point.create_polar(1, 2)
        Point.factory.create_cartesian(1, 2)
    """

    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y

    @classmethod
    def create_cartesian(cls, x: float, y: float) -> 'Point':
        return cls(x, y)

    @classmethod
    def create_polar(cls, rho: float, theta: float) -> 'Point':
        return cls(rho * math.cos(theta), rho * math.sin(theta))

    def __str__(self) -> str:
        return f"x = {self.x}, y= {self.y}"

    def __repr__(self) -> str:
        return f"Point(x={self.x!r}, y={self.y!r})"

    class PointFactory:
        """Singleton factory grouping the Point constructors."""

        _instance: Optional['Point.PointFactory'] = None
        _lock = threading.Lock()

        def __new__(cls) -> 'Point.PointFactory':
            """Ensure singleton instance."""
            if cls._instance is None:
                with cls._lock:
                    if cls._instance is None:
                        cls._instance = super().__new__(cls)
            return cls._instance

        def create_cartesian(self, x: float, y: float) -> 'Point':
            return Point.create_cartesian(x, y)

        def create_polar(self, rho: float, theta: float) -> 'Point':
            return Point.create_polar(rho, theta)


Point.factory = Point.PointFactory()
