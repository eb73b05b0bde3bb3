"""
Projection of one (x, y) plane of an N-dimensional dataset onto a raster.

A projector holds a position vector with one coordinate per dataset
dimension. The coordinates of the x and y axes are ignored; the others select
which plane :meth:`XYProjector.map` renders. Mapping always rewrites the whole
raster.
"""

import logging
from typing import List, Sequence, Tuple

import numpy as np

from hyperstack.constants.constants import OPAQUE_ALPHA
from hyperstack.core.dataset import Dataset
from hyperstack.core.memory.sample_kind import to_double
from hyperstack.display.color_table import ColorTable8, pack_argb
from hyperstack.display.converters import (CompositeLUTConverter,
                                           RealARGBConverter, RealLUTConverter)
from hyperstack.display.screen_image import ARGBScreenImage

logger = logging.getLogger(__name__)


class XYProjector:
    """Renders the current plane through a single converter."""

    def __init__(self, dataset: Dataset, screen_image: ARGBScreenImage,
                 converter: RealARGBConverter, x_axis: int = 0, y_axis: int = 1):
        ndim = dataset.num_dimensions
        if ndim < 2:
            raise ValueError(f"Projection needs at least 2 dimensions, dataset has {ndim}")
        for label, axis in (("x_axis", x_axis), ("y_axis", y_axis)):
            if not 0 <= axis < ndim:
                raise ValueError(f"{label} {axis} out of range for {ndim} dimensions")
        if x_axis == y_axis:
            raise ValueError(f"x_axis and y_axis must differ, both are {x_axis}")

        width, height = dataset.dimension(x_axis), dataset.dimension(y_axis)
        if (screen_image.width, screen_image.height) != (width, height):
            raise ValueError(
                f"Screen image is {screen_image.width}x{screen_image.height}, "
                f"plane is {width}x{height}"
            )

        self.dataset = dataset
        self.screen_image = screen_image
        self.converter = converter
        self.x_axis = x_axis
        self.y_axis = y_axis
        self._position = [0] * ndim

    @property
    def position(self) -> Tuple[int, ...]:
        return tuple(self._position)

    def get_position(self, dim: int) -> int:
        return self._position[dim]

    def set_position(self, value: int, dim: int) -> None:
        self._position[dim] = int(value)

    def _plane(self, position: Sequence[int]) -> np.ndarray:
        """Samples of the plane at ``position`` as doubles, indexed [y, x]."""
        index = tuple(
            slice(None) if dim in (self.x_axis, self.y_axis) else position[dim]
            for dim in range(len(position))
        )
        plane = to_double(self.dataset.data[index])
        # Remaining axes keep their order, so x comes first when x_axis < y_axis
        return plane.T if self.x_axis < self.y_axis else plane

    def map(self) -> None:
        self.screen_image.data[...] = self.converter.convert(self._plane(self._position))


class LutXYProjector(XYProjector):
    """Renders the current plane through a swappable color table."""

    def __init__(self, dataset: Dataset, screen_image: ARGBScreenImage,
                 converter: RealLUTConverter, x_axis: int = 0, y_axis: int = 1):
        super().__init__(dataset, screen_image, converter, x_axis, y_axis)

    def set_lut(self, color_table: ColorTable8) -> None:
        self.converter.set_color_table(color_table)


class CompositeXYProjector(XYProjector):
    """
    Renders every channel of the current position and blends them.

    Blending is additive and saturating: each channel's RGB contribution is
    computed from its own samples and color table, contributions are summed
    in channel order and each component is clamped to 255. Alpha is opaque.
    The position along the channel axis is ignored.
    """

    def __init__(self, dataset: Dataset, screen_image: ARGBScreenImage,
                 converters: List[CompositeLUTConverter], channel_axis: int,
                 x_axis: int = 0, y_axis: int = 1):
        super().__init__(dataset, screen_image, converters[0] if converters else None,
                         x_axis, y_axis)
        if channel_axis in (x_axis, y_axis) or not 0 <= channel_axis < dataset.num_dimensions:
            raise ValueError(f"Invalid channel axis {channel_axis} for composite projection")
        channels = dataset.dimension(channel_axis)
        if not converters or len(converters) > channels:
            raise ValueError(
                f"Composite projection needs between 1 and {channels} converters, "
                f"got {len(converters)}"
            )
        self.converters = list(converters)
        self.channel_axis = channel_axis

    def map(self) -> None:
        height, width = self.screen_image.height, self.screen_image.width
        accumulated = np.zeros((height, width, 3), dtype=np.int64)
        position = list(self._position)
        for channel, converter in enumerate(self.converters):
            position[self.channel_axis] = channel
            accumulated += converter.contribution(self._plane(position))

        np.minimum(accumulated, 255, out=accumulated)
        self.screen_image.data[...] = pack_argb(OPAQUE_ALPHA, accumulated[..., 0],
                                                accumulated[..., 1], accumulated[..., 2])
