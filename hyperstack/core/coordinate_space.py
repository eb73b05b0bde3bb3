"""
Dense rectangular N-dimensional coordinate spaces.

A :class:`CoordinateSpace` describes a hyper-rectangular block of integer
coordinates and the order in which they are visited. Iteration order is fixed:
axis 0 varies fastest, then axis 1, and so on (raster order, x before y before
any higher axis). Consumers depend on this order for determinism only.
"""

import logging
from typing import Iterator, Sequence, Tuple

from hyperstack.core.exceptions import InvalidRegionError

logger = logging.getLogger(__name__)

Position = Tuple[int, ...]


class CoordinateIterator:
    """
    Cursor over the positions of a coordinate space.

    Supports both the explicit ``has_next()`` / ``next()`` protocol and the
    Python iterator protocol. ``reset()`` restarts the walk from the origin.
    """

    def __init__(self, space: "CoordinateSpace"):
        self._space = space
        self._remaining = space.size
        self._current = None

    def reset(self) -> None:
        self._remaining = self._space.size
        self._current = None

    def has_next(self) -> bool:
        return self._remaining > 0

    def next(self) -> Position:
        """
        Advance to the next position and return it.

        Raises:
            StopIteration: If every position has been visited
        """
        if self._remaining <= 0:
            raise StopIteration

        if self._current is None:
            self._current = list(self._space.origin)
        else:
            origin = self._space.origin
            last = self._space.last
            for axis in range(len(self._current)):
                if self._current[axis] < last[axis]:
                    self._current[axis] += 1
                    break
                self._current[axis] = origin[axis]

        self._remaining -= 1
        return tuple(self._current)

    def __iter__(self) -> "CoordinateIterator":
        return self

    def __next__(self) -> Position:
        return self.next()


class CoordinateSpace:
    """
    Rectangular region of an N-dimensional index space.

    The region covers ``origin[i] .. origin[i] + span[i] - 1`` (inclusive) on
    every axis ``i``.

    Attributes:
        origin: First position of the region
        span: Number of positions along each axis
        last: Last position of the region (inclusive)
        size: Total number of positions
    """

    def __init__(self, origin: Sequence[int], span: Sequence[int]):
        """
        Initialize a coordinate space.

        Args:
            origin: First position of the region
            span: Number of positions along each axis

        Raises:
            InvalidRegionError: If any span is non-positive or the lengths differ
        """
        origin = tuple(int(o) for o in origin)
        span = tuple(int(s) for s in span)
        if len(origin) != len(span):
            raise InvalidRegionError(
                f"Origin has {len(origin)} axes but span has {len(span)}"
            )
        if not span:
            raise InvalidRegionError("A coordinate space needs at least one axis")
        for axis, extent in enumerate(span):
            if extent <= 0:
                raise InvalidRegionError(
                    f"Span on axis {axis} must be positive, got {extent}"
                )

        self._origin = origin
        self._span = span
        self._last = tuple(o + s - 1 for o, s in zip(origin, span))

        # Python ints do not overflow; element counts beyond 2**63 are fine
        size = 1
        for extent in span:
            size *= extent
        self._size = size

    @classmethod
    def from_bounds(cls, first: Sequence[int], last: Sequence[int]) -> "CoordinateSpace":
        """Build the region between two inclusive corner positions."""
        if len(first) != len(last):
            raise InvalidRegionError(
                f"First point has {len(first)} axes but last point has {len(last)}"
            )
        return cls(first, [int(b) - int(a) + 1 for a, b in zip(first, last)])

    @classmethod
    def from_dimensions(cls, dimensions: Sequence[int]) -> "CoordinateSpace":
        """Build the region covering a whole image of the given dimensions."""
        first = [0] * len(dimensions)
        last = [int(d) - 1 for d in dimensions]
        return cls.from_bounds(first, last)

    @property
    def origin(self) -> Position:
        return self._origin

    @property
    def span(self) -> Tuple[int, ...]:
        return self._span

    @property
    def last(self) -> Position:
        return self._last

    @property
    def size(self) -> int:
        return self._size

    @property
    def num_dimensions(self) -> int:
        return len(self._span)

    def iterator(self) -> CoordinateIterator:
        """Return a fresh cursor positioned before the origin."""
        return CoordinateIterator(self)

    def __iter__(self) -> Iterator[Position]:
        return self.iterator()

    def contains(self, position: Sequence[int]) -> bool:
        if len(position) != len(self._span):
            return False
        return all(o <= p <= l for o, p, l in zip(self._origin, position, self._last))

    def slices(self) -> Tuple[slice, ...]:
        """Numpy index selecting the same region of an array."""
        return tuple(slice(o, l + 1) for o, l in zip(self._origin, self._last))

    def __repr__(self) -> str:
        return f"CoordinateSpace(origin={list(self._origin)}, span={list(self._span)})"


def iter_planes(dimensions: Sequence[int], plane_rank: int = 2) -> Iterator[Tuple]:
    """
    Yield numpy indices selecting each plane of an image in raster order.

    The first ``plane_rank`` axes form the plane; the remaining axes are walked
    with a :class:`CoordinateSpace`, so planes come out with axis 2 varying
    fastest. An image of rank ``<= plane_rank`` is a single plane.

    Args:
        dimensions: Size of each axis of the image
        plane_rank: Number of leading axes that make up one plane

    Yields:
        Index tuples of the form ``(slice(None), slice(None), z, c, ...)``
    """
    dimensions = tuple(int(d) for d in dimensions)
    rank = min(plane_rank, len(dimensions))
    head = (slice(None),) * rank
    outer = dimensions[rank:]
    if not outer:
        yield head
        return
    for position in CoordinateSpace.from_dimensions(outer):
        yield head + position
