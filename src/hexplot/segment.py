"""Line segments, line-line intersection and segment-rectangle clipping.

Intersections use the slope-intercept form y = mx + b. Parallel lines,
including coincident ones, are never considered to intersect.
"""

import math
from dataclasses import dataclass

from .geometry import Point, Rect


def _round(value: float) -> int:
    # Half-up, so -0.5 rounds to 0 rather than to even
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point

    @classmethod
    def from_coords(cls, x1: int, y1: int, x2: int, y2: int) -> "Segment":
        return cls(Point(x1, y1), Point(x2, y2))

    @property
    def is_vertical(self) -> bool:
        return self.start.x == self.end.x

    @property
    def slope(self) -> float:
        """Slope of the line, or +inf when vertical."""
        if self.is_vertical:
            return math.inf
        return (self.end.y - self.start.y) / (self.end.x - self.start.x)

    @property
    def y_intercept(self) -> float:
        """Where the line crosses the y axis, or NaN when vertical."""
        if self.is_vertical:
            return math.nan
        return self.start.y - self.slope * self.start.x

    def bounds_contain(self, point: Point) -> bool:
        """Whether the point lies inside this segment's bounding box."""
        return (
            min(self.start.x, self.end.x) <= point.x <= max(self.start.x, self.end.x)
            and min(self.start.y, self.end.y) <= point.y <= max(self.start.y, self.end.y)
        )

    def __str__(self) -> str:
        return f"Segment({self.start}, {self.end})"


def edges(rect: Rect) -> tuple[Segment, ...]:
    """The rect's sides in scan order: left, top, right, bottom."""
    return (
        Segment.from_coords(rect.left, rect.bottom, rect.left, rect.top),
        Segment.from_coords(rect.left, rect.top, rect.right, rect.top),
        Segment.from_coords(rect.right, rect.top, rect.right, rect.bottom),
        Segment.from_coords(rect.right, rect.bottom, rect.left, rect.bottom),
    )


def _intersect_at_x(segment: Segment, x: int) -> Point | None:
    point = Point(x, _round(segment.slope * x + segment.y_intercept))
    if segment.bounds_contain(point):
        return point
    return None


def intersect(a: Segment, b: Segment) -> Point | None:
    """Point where two segments cross, or None."""
    # Computed in double precision. Single precision can round crossings far
    # from the origin to a neighbouring point.
    if a.is_vertical and b.is_vertical:
        return None

    if a.is_vertical:
        point = _intersect_at_x(b, a.start.x)
    elif b.is_vertical:
        point = _intersect_at_x(a, b.start.x)
    else:
        m1, m2 = a.slope, b.slope
        if m1 == m2:
            return None
        b1, b2 = a.y_intercept, b.y_intercept
        x = (b2 - b1) / (m1 - m2)
        y = m1 * x + b1
        point = Point(_round(x), _round(y))

    if point is not None and a.bounds_contain(point) and b.bounds_contain(point):
        return point
    return None


def clip(segment: Segment, rect: Rect) -> Segment | None:
    """Clip a segment to the rect, or None if it never reaches the rect."""
    start_inside = rect.contains(segment.start)
    end_inside = rect.contains(segment.end)
    if start_inside and end_inside:
        return Segment(segment.start, segment.end)

    # A finite segment crosses a rectangle's border at most twice
    crossings: list[Point] = []
    for edge in edges(rect):
        point = intersect(segment, edge)
        if point is not None and point not in crossings:
            crossings.append(point)
            if len(crossings) == 2:
                break

    if len(crossings) == 1:
        if start_inside:
            return Segment(segment.start, crossings[0])
        if end_inside:
            return Segment(crossings[0], segment.end)
        # Tangential touch
        return None

    if len(crossings) == 2:
        return Segment(crossings[0], crossings[1])

    return None
