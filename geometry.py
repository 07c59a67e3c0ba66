import numbers
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D point. Equality is exact coordinate equality,
    so points differing only by rounding noise are distinct.
    """
    x: float
    y: float

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def __lt__(self, other):
        return self.x < other.x or self.x == other.x and self.y < other.y


def as_point(item) -> Point:
    """
    Convert a pair of real numbers (tuple, list, numpy row) to Point.
    Non-numeric coordinates, numeric strings included, raise TypeError.
    """
    if isinstance(item, Point):
        return item
    x, y = item
    if not isinstance(x, numbers.Real) or not isinstance(y, numbers.Real):
        raise TypeError(f'Coordinates must be real numbers, got {x!r}, {y!r}')
    return Point(float(x), float(y))


def distance_indicator(start: Point, end: Point, point: Point) -> float:
    """
    Signed indicator of the distance between `point` and the line start -> end.

    The value is twice the signed area of triangle (start, end, point):
    positive if the point is left of the line, zero if collinear,
    negative if right of it. Good for comparisons only, it is not
    a metric distance.
    """
    line = end - start
    vec = point - start
    return vec.y * line.x - vec.x * line.y


def select_left_points(
    start: Point,
    end: Point,
    points: Iterable[Point]
) -> list[tuple[Point, float]]:
    """
    Pair every point strictly left of start -> end with its distance indicator.
    Collinear points and points on the right are dropped.
    """
    pairs = []
    for p in points:
        dist = distance_indicator(start, end, p)
        if dist > 0:
            pairs.append((p, dist))
    return pairs


def select_farthest_point(pairs: Sequence[tuple[Point, float]]) -> Point | None:
    """
    Point with the largest distance indicator, first one wins on ties.
    None means there is nothing left of the line.
    """
    farthest = None
    max_dist = 0
    for p, dist in pairs:
        if dist > max_dist:
            max_dist = dist
            farthest = p
    return farthest
