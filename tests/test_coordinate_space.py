"""
Tests for coordinate spaces and plane iteration.
"""
import numpy as np
import pytest

from hyperstack.core.coordinate_space import CoordinateSpace, iter_planes
from hyperstack.core.exceptions import InvalidRegionError


class TestIterationOrder:

    def test_first_axis_varies_fastest(self):
        space = CoordinateSpace.from_dimensions((2, 3))
        assert list(space) == [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2), (1, 2)]

    def test_has_next_next_protocol(self):
        iterator = CoordinateSpace((0,), (2,)).iterator()
        assert iterator.has_next()
        assert iterator.next() == (0,)
        assert iterator.has_next()
        assert iterator.next() == (1,)
        assert not iterator.has_next()
        with pytest.raises(StopIteration):
            iterator.next()

    def test_space_is_restartable(self):
        space = CoordinateSpace.from_dimensions((3, 2, 2))
        assert list(space) == list(space)
        assert len(list(space)) == space.size == 12

    def test_iterator_reset(self):
        iterator = CoordinateSpace.from_dimensions((2, 2)).iterator()
        first = [iterator.next(), iterator.next()]
        iterator.reset()
        assert [iterator.next(), iterator.next()] == first

    def test_origin_offset(self):
        space = CoordinateSpace((1, 2), (2, 1))
        assert list(space) == [(1, 2), (2, 2)]
        assert space.last == (2, 2)

    def test_visits_every_position_once(self):
        dims = (3, 4, 2)
        positions = list(CoordinateSpace.from_dimensions(dims))
        assert len(set(positions)) == int(np.prod(dims))


class TestRegionConstruction:

    def test_from_bounds_is_inclusive(self):
        space = CoordinateSpace.from_bounds((0, 0), (1, 1))
        assert space.span == (2, 2)
        assert space.size == 4

    def test_from_dimensions_last_index(self):
        space = CoordinateSpace.from_dimensions((5, 7))
        assert space.origin == (0, 0)
        assert space.last == (4, 6)

    @pytest.mark.parametrize("span", [(0, 2), (2, -1), (0,)])
    def test_non_positive_span_rejected(self, span):
        with pytest.raises(InvalidRegionError):
            CoordinateSpace([0] * len(span), span)

    def test_invalid_region_is_value_error(self):
        with pytest.raises(ValueError):
            CoordinateSpace((0,), (0,))

    def test_last_before_first_rejected(self):
        with pytest.raises(InvalidRegionError):
            CoordinateSpace.from_bounds((2, 0), (1, 0))

    def test_axis_count_mismatch_rejected(self):
        with pytest.raises(InvalidRegionError):
            CoordinateSpace((0, 0), (1,))

    def test_empty_space_rejected(self):
        with pytest.raises(InvalidRegionError):
            CoordinateSpace((), ())

    def test_size_beyond_32_bits(self):
        space = CoordinateSpace.from_dimensions((100000, 100000, 100000))
        assert space.size == 10 ** 15

    def test_contains(self):
        space = CoordinateSpace((1, 1), (2, 2))
        assert space.contains((2, 2))
        assert not space.contains((0, 1))
        assert not space.contains((1, 1, 0))

    def test_slices_select_same_region(self):
        array = np.arange(20).reshape(4, 5)
        space = CoordinateSpace((1, 2), (2, 3))
        expected = np.array([array[p] for p in space])
        assert sorted(array[space.slices()].ravel()) == sorted(expected)


class TestPlaneIteration:

    def test_two_dimensional_image_is_one_plane(self):
        assert list(iter_planes((4, 3))) == [(slice(None), slice(None))]

    def test_one_dimensional_image_is_one_plane(self):
        assert list(iter_planes((4,))) == [(slice(None),)]

    def test_higher_axes_walked_in_raster_order(self):
        planes = list(iter_planes((2, 2, 3, 2)))
        outer = [index[2:] for index in planes]
        assert outer == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]
