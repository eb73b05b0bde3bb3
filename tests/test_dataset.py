"""
Tests for Dataset random access, notifications and the allocation service.
"""
from unittest.mock import MagicMock

import numpy as np
import pytest

from hyperstack.constants.constants import Axis
from hyperstack.core.coordinate_space import CoordinateSpace
from hyperstack.core.dataset import Dataset, DatasetService, default_axes
from hyperstack.core.exceptions import SampleKindError
from hyperstack.core.memory.sample_kind import SampleKind


class TestDatasetConstruction:

    def test_default_axes(self):
        dataset = Dataset(np.zeros((2, 3, 4), dtype=np.uint8))
        assert dataset.axes == (Axis.X, Axis.Y, Axis.Z)
        assert dataset.dimensions == (2, 3, 4)
        assert dataset.num_dimensions == 3

    def test_default_axes_beyond_known_labels(self):
        assert default_axes(6)[-1] is Axis.UNKNOWN
        assert default_axes(5)[-1] is Axis.TIME

    def test_sample_kind_from_dtype(self):
        dataset = Dataset(np.zeros((2, 2), dtype=np.int16))
        assert dataset.sample_kind is SampleKind.INT16
        assert dataset.bits_per_pixel == 16
        assert dataset.is_signed
        assert dataset.is_integer

    def test_axes_length_must_match(self):
        with pytest.raises(ValueError):
            Dataset(np.zeros((2, 2)), axes=[Axis.X])

    def test_requires_numpy_array(self):
        with pytest.raises(TypeError):
            Dataset([[1, 2], [3, 4]])

    def test_rejects_scalar_array(self):
        with pytest.raises(ValueError):
            Dataset(np.array(3.0))

    def test_rejects_unsupported_dtype(self):
        with pytest.raises(SampleKindError):
            Dataset(np.zeros((2, 2), dtype=np.int64))

    def test_get_axis_index(self):
        dataset = Dataset(np.zeros((2, 2, 3)), axes=[Axis.X, Axis.Y, Axis.CHANNEL])
        assert dataset.get_axis_index(Axis.CHANNEL) == 2
        assert dataset.get_axis_index(Axis.TIME) == -1


class TestRandomAccess:

    def test_get_real_returns_double(self):
        data = np.arange(6, dtype=np.uint8).reshape(2, 3)
        dataset = Dataset(data)
        assert dataset.get_real((1, 2)) == 5.0
        assert isinstance(dataset.get_real((1, 2)), float)

    def test_set_real_narrows(self):
        dataset = Dataset(np.zeros((2, 2), dtype=np.uint8))
        dataset.set_real((0, 1), 300.7)
        dataset.set_real((1, 0), 41.5)
        assert dataset.data[0, 1] == 255
        assert dataset.data[1, 0] == 42

    @pytest.mark.parametrize("position", [(2, 0), (0, -1), (0,), (0, 0, 0)])
    def test_out_of_range_position(self, position):
        dataset = Dataset(np.zeros((2, 2), dtype=np.uint8))
        with pytest.raises(IndexError):
            dataset.get_real(position)

    def test_region_access(self):
        dataset = Dataset(np.zeros((3, 3), dtype=np.uint16))
        space = CoordinateSpace((1, 1), (2, 2))
        dataset.set_region(space, np.full((2, 2), 7.6))
        assert dataset.get_region(space).tolist() == [[8.0, 8.0], [8.0, 8.0]]
        assert dataset.data[0, 0] == 0

    def test_fill(self):
        dataset = Dataset(np.zeros((2, 2), dtype=np.int8))
        dataset.fill(-200)
        assert (dataset.data == -128).all()


class TestNotifications:

    def test_update_notifies_listeners(self):
        dataset = Dataset(np.zeros((2, 2)))
        listener = MagicMock()
        dataset.add_listener(listener)
        dataset.add_listener(listener)
        dataset.update()
        listener.assert_called_once_with(dataset)

    def test_removed_listener_not_notified(self):
        dataset = Dataset(np.zeros((2, 2)))
        listener = MagicMock()
        dataset.add_listener(listener)
        dataset.remove_listener(listener)
        dataset.update()
        listener.assert_not_called()


class TestDatasetService:

    def test_create_allocates_zeroed_dataset(self):
        service = DatasetService()
        axes = [Axis.X, Axis.Y, Axis.Z]
        dataset = service.create((3, 2, 4), "Result", axes, 16, False, False)
        assert dataset.name == "Result"
        assert dataset.dimensions == (3, 2, 4)
        assert dataset.axes == tuple(axes)
        assert dataset.sample_kind is SampleKind.UINT16
        assert not dataset.data.any()

    def test_create_double_dataset(self):
        dataset = DatasetService().create((2, 2), "d", [Axis.X, Axis.Y], 64, True, True)
        assert dataset.sample_kind is SampleKind.FLOAT64

    def test_create_rejects_non_positive_dimension(self):
        with pytest.raises(ValueError):
            DatasetService().create((2, 0), "bad", [Axis.X, Axis.Y], 8, False, False)

    def test_create_rejects_unsupported_kind(self):
        with pytest.raises(SampleKindError):
            DatasetService().create((2, 2), "bad", [Axis.X, Axis.Y], 64, False, False)
