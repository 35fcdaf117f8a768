"""Points and the bounding rectangle."""

from dataclasses import dataclass

from .codec import MAX_VALUE, MIN_VALUE


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0

    def offset(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in screen orientation (top < bottom).

    Unlike most rectangle types, all four edges count as inside.
    """

    left: int
    top: int
    right: int
    bottom: int

    @property
    def is_degenerate(self) -> bool:
        return self.left >= self.right or self.top >= self.bottom

    def contains(self, point: Point) -> bool:
        return (
            not self.is_degenerate
            and self.left <= point.x <= self.right
            and self.top <= point.y <= self.bottom
        )


def contains(rect: Rect, point: Point) -> bool:
    """Inclusive containment; a degenerate rect contains nothing."""
    return rect.contains(point)


BOUNDING_SQUARE = Rect(MIN_VALUE, MIN_VALUE, MAX_VALUE, MAX_VALUE)
