"""
In-memory N-dimensional images for hyperstack.

This module provides the Dataset class, a thin wrapper around a dense numpy
array that carries per-axis labels and an explicit sample kind, and the
DatasetService allocation factory used to create result images.

All random access goes through double precision: ``get_real`` widens a
sample, ``set_real`` narrows a value into the image's sample kind.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from hyperstack.constants.constants import DEFAULT_AXIS_ORDER, Axis
from hyperstack.core.coordinate_space import CoordinateSpace
from hyperstack.core.memory.sample_kind import (SampleKind, from_double,
                                               to_double)

logger = logging.getLogger(__name__)

DatasetListener = Callable[["Dataset"], None]


def default_axes(num_dimensions: int) -> Tuple[Axis, ...]:
    """Axis labels assumed for an image that does not declare any."""
    axes = list(DEFAULT_AXIS_ORDER[:num_dimensions])
    axes.extend([Axis.UNKNOWN] * (num_dimensions - len(axes)))
    return tuple(axes)


class Dataset:
    """
    Dense N-dimensional image with labelled axes.

    Axis 0 is the raster width (X) and axis 1 the raster height (Y); the
    backing array is indexed ``data[x, y, ...]``.

    Attributes:
        name: Display name of the image
        data: The backing numpy array (mutable in place)
        axes: Semantic label of each dimension
        sample_kind: Numeric representation of the samples
    """

    def __init__(self, data: np.ndarray, name: str = "Untitled",
                 axes: Optional[Sequence[Axis]] = None):
        """
        Wrap an array as a dataset.

        Args:
            data: Backing array; must have at least one dimension
            name: Display name
            axes: One label per dimension (defaults to X, Y, Z, Channel, Time)

        Raises:
            TypeError: If data is not a numpy array
            ValueError: If data is 0-dimensional or axes has the wrong length
            SampleKindError: If the dtype is not a supported sample kind
        """
        if not isinstance(data, np.ndarray):
            raise TypeError(f"Dataset data must be a NumPy array, got {type(data)}")
        if data.ndim == 0:
            raise ValueError("Dataset data must have at least one dimension")

        self._sample_kind = SampleKind.from_dtype(data.dtype)
        axes = default_axes(data.ndim) if axes is None else tuple(axes)
        if len(axes) != data.ndim:
            raise ValueError(
                f"Dataset has {data.ndim} dimensions but {len(axes)} axis labels were given"
            )

        self._data = data
        self._axes = axes
        self.name = name
        self._listeners: List[DatasetListener] = []

    @property
    def data(self) -> np.ndarray:
        return self._data

    @property
    def axes(self) -> Tuple[Axis, ...]:
        return self._axes

    @property
    def sample_kind(self) -> SampleKind:
        return self._sample_kind

    @property
    def dimensions(self) -> Tuple[int, ...]:
        return tuple(int(d) for d in self._data.shape)

    @property
    def num_dimensions(self) -> int:
        return self._data.ndim

    @property
    def bits_per_pixel(self) -> int:
        return self._sample_kind.bits

    @property
    def is_signed(self) -> bool:
        return self._sample_kind.signed

    @property
    def is_integer(self) -> bool:
        return self._sample_kind.is_integer

    def dimension(self, axis_index: int) -> int:
        return int(self._data.shape[axis_index])

    def get_axis_index(self, axis: Axis) -> int:
        """Index of the first dimension labelled ``axis``, or -1."""
        try:
            return self._axes.index(axis)
        except ValueError:
            return -1

    def _check_position(self, position: Sequence[int]) -> Tuple[int, ...]:
        position = tuple(int(p) for p in position)
        if len(position) != self._data.ndim:
            raise IndexError(
                f"Position {list(position)} has {len(position)} coordinates, "
                f"dataset has {self._data.ndim} dimensions"
            )
        for axis, (p, size) in enumerate(zip(position, self._data.shape)):
            if not 0 <= p < size:
                raise IndexError(f"Coordinate {p} out of range [0, {size}) on axis {axis}")
        return position

    def get_real(self, position: Sequence[int]) -> float:
        """Read one sample as a double."""
        return float(self._data[self._check_position(position)])

    def set_real(self, position: Sequence[int], value: float) -> None:
        """Write one value, narrowed into the dataset's sample kind."""
        self._data[self._check_position(position)] = from_double(value, self._sample_kind)

    def get_region(self, space: CoordinateSpace) -> np.ndarray:
        """Read every sample of a region as a double precision array."""
        return to_double(self._data[space.slices()])

    def set_region(self, space: CoordinateSpace, values: np.ndarray) -> None:
        """Write a block of double values into a region, narrowing each one."""
        self._data[space.slices()] = from_double(values, self._sample_kind)

    def fill(self, value: float) -> None:
        self._data[...] = from_double(value, self._sample_kind)

    def add_listener(self, listener: DatasetListener) -> None:
        """Register a callback invoked by :meth:`update`."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: DatasetListener) -> None:
        self._listeners.remove(listener)

    def update(self) -> None:
        """Notify listeners that the dataset's samples changed."""
        logger.debug("Dataset '%s' updated, notifying %d listener(s)",
                     self.name, len(self._listeners))
        for listener in list(self._listeners):
            listener(self)

    def __repr__(self) -> str:
        axes = ",".join(a.value for a in self._axes)
        return (f"Dataset(name={self.name!r}, dimensions={list(self.dimensions)}, "
                f"axes=[{axes}], kind={self._sample_kind.value})")


class DatasetService:
    """Allocation factory for new datasets."""

    def create(self, dimensions: Sequence[int], name: str, axes: Sequence[Axis],
               bits_per_pixel: int, signed: bool, floating: bool) -> Dataset:
        """
        Allocate a zero-filled dataset.

        Args:
            dimensions: Size of each axis (all positive)
            name: Display name of the new dataset
            axes: Label of each axis
            bits_per_pixel: Bits per sample
            signed: Whether samples are signed
            floating: Whether samples are floating point

        Returns:
            The new Dataset

        Raises:
            ValueError: If a dimension is not positive
            SampleKindError: If the bit depth/sign/float combination is unsupported
        """
        dimensions = tuple(int(d) for d in dimensions)
        if any(d <= 0 for d in dimensions):
            raise ValueError(f"Dataset dimensions must be positive, got {list(dimensions)}")

        kind = SampleKind.from_properties(bits_per_pixel, signed, floating)
        logger.debug("Allocating dataset '%s' %s of kind %s", name, list(dimensions), kind.value)
        return Dataset(np.zeros(dimensions, dtype=kind.dtype), name=name, axes=axes)
