"""Sample points and the sorted, duplicate-free point set."""

from typing import NamedTuple

from polyconst.errors import DuplicateXError, InsufficientPointsError


class Point(NamedTuple):
    """One sample (x, y) of the unknown polynomial."""
    x: int
    y: int


class PointSet:
    """Immutable points sorted ascending by x.

    Sorting makes "first k points" reproducible regardless of the order
    the points were supplied in.
    """

    __slots__ = ('_points',)

    def __init__(self, points=()):
        """Sort Points or (x, y) pairs by x.

        Raises:
            DuplicateXError: two points share an x value.
        """
        pts = sorted((Point(x, y) for x, y in points),
                     key=lambda p: p.x)
        for prev, cur in zip(pts, pts[1:]):
            if prev.x == cur.x:
                raise DuplicateXError(cur.x)
        self._points = tuple(pts)

    @classmethod
    def build(cls, points) -> 'PointSet':
        """Build from Points or (x, y) pairs. Same checks as the constructor."""
        return cls(points)

    def first_k(self, k: int) -> tuple:
        """The k points with smallest x."""
        if k < 1:
            raise ValueError(f"k must be >= 1, got {k}")
        if len(self._points) < k:
            raise InsufficientPointsError(len(self._points), k)
        return self._points[:k]

    def rest(self, k: int) -> tuple:
        """Points left over after first_k(k)."""
        return self._points[k:]

    @property
    def xs(self) -> list:
        return [p.x for p in self._points]

    @property
    def ys(self) -> list:
        return [p.y for p in self._points]

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    def __getitem__(self, i):
        return self._points[i]

    def __eq__(self, other):
        if isinstance(other, PointSet):
            return self._points == other._points
        return NotImplemented

    def __hash__(self):
        return hash(self._points)

    def __repr__(self):
        return f"PointSet({list(self._points)!r})"
