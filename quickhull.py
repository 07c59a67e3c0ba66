import logging
from typing import Sequence

from geometry import Point, as_point, select_left_points, select_farthest_point
from util import timeit

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    pass


class QuickHull:
    """
    Convex hull of a fixed set of 2D points, built with QuickHull.

    Hull points are ordered clockwise. The hull is computed on the first
    `get_hull_points` call and cached for the lifetime of the object.
    """

    def __init__(self, points: Sequence, iterative: bool = False):
        self.input_points = points
        self.iterative = iterative
        try:
            self.points: list[Point] = [as_point(p) for p in points]
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f'Points must be pairs of real numbers: {e}') from e

        self._hull_points: list[Point] = []
        self._computed = False

    def get_input_points(self) -> Sequence:
        return self.input_points

    def get_hull_points(self) -> list[Point]:
        if not self._computed:
            self._hull_points = self.compute_hull()
            self._computed = True
        return self._hull_points

    def extreme_points(self) -> tuple[Point, Point]:
        """
        Leftmost and rightmost points, first occurrence wins on ties.
        If all points share the same x, lowest and highest points are used instead.
        """
        if not self.points:
            raise InvalidInputError('Convex hull of an empty point set is undefined')

        min_pt = max_pt = self.points[0]
        for p in self.points:
            if p.x < min_pt.x:
                min_pt = p
            if p.x > max_pt.x:
                max_pt = p

        if min_pt == max_pt:
            for p in self.points:
                if p.y < min_pt.y:
                    min_pt = p
                if p.y > max_pt.y:
                    max_pt = p
        return min_pt, max_pt

    @timeit
    def compute_hull(self) -> list[Point]:
        min_pt, max_pt = self.extreme_points()
        logger.debug('Computing hull of %d points, extremes %s and %s', len(self.points), min_pt, max_pt)

        if min_pt == max_pt:
            return [min_pt]

        build = self.quick_hull_iterative if self.iterative else self.quick_hull
        hull = build(self.points, min_pt, max_pt) + build(self.points, max_pt, min_pt)

        logger.debug('Hull has %d points', len(hull))
        return hull

    @classmethod
    def quick_hull(cls, points: Sequence[Point], start: Point, end: Point) -> list[Point]:
        """
        Hull chain for the points left of start -> end, excluding `start`
        and ending with `end`.

        The farthest point from the line (pivot) is a hull vertex. Points inside
        the triangle (start, pivot, end) are left of neither (start, pivot) nor
        (pivot, end), so both recursive calls drop them.

        Time complexity: O(n*log(n)) on average, O(n^2) in the worst case.
        """
        pairs = select_left_points(start, end, points)
        pivot = select_farthest_point(pairs)
        if pivot is None:
            return [end]

        left_points = [p for p, _ in pairs]
        return (
            cls.quick_hull(left_points, start, pivot)
            + cls.quick_hull(left_points, pivot, end)
        )

    @staticmethod
    def quick_hull_iterative(points: Sequence[Point], start: Point, end: Point) -> list[Point]:
        """
        Same as `quick_hull`, driven by an explicit stack of pending
        (points, start, end) segments instead of recursion.
        """
        hull = []
        stack = [(points, start, end)]
        while stack:
            seg_points, seg_start, seg_end = stack.pop()
            pairs = select_left_points(seg_start, seg_end, seg_points)
            pivot = select_farthest_point(pairs)
            if pivot is None:
                hull.append(seg_end)
                continue

            left_points = [p for p, _ in pairs]
            # right segment goes first so the left one is popped first
            stack.append((left_points, pivot, seg_end))
            stack.append((left_points, seg_start, pivot))
        return hull
