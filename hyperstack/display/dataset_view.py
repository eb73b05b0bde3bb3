"""
Dataset views: live ARGB projections of N-dimensional datasets.

A :class:`DatasetView` owns the raster shown by a canvas and decides, once at
construction, how samples become colors:

- no channel axis, no color tables: direct gray mapping (``none``)
- no channel axis, color tables: first table for everything (``single-lut``)
- channel axis, composite: every channel blended into each pixel (``composite``)
- channel axis, not composite: table of the current channel (``per-plane-lut``)

Changing the position along a non-displayed axis only updates state and asks
the canvas to redisplay; pixels are recomputed by :meth:`DatasetView.project`.
"""

import logging
from typing import List, Optional, Protocol, Sequence, Tuple

from hyperstack.constants.constants import DisplayMode
from hyperstack.core.config import DisplayConfig
from hyperstack.core.dataset import Dataset
from hyperstack.display.color_table import ColorTable8
from hyperstack.display.converters import (CompositeLUTConverter,
                                           RealARGBConverter, RealLUTConverter)
from hyperstack.display.projectors import (CompositeXYProjector,
                                           LutXYProjector, XYProjector)
from hyperstack.display.screen_image import ARGBScreenImage

logger = logging.getLogger(__name__)


class ImageCanvas(Protocol):
    """Display surface that repaints a view's raster on request."""

    def update_image(self) -> None:
        ...


class DatasetView:
    """
    View into a dataset, rendered as an ARGB screen image.

    Attributes:
        name: View name
        dataset: The dataset being displayed
        mode: Projection strategy, fixed at construction
        position_x: Horizontal pan offset of the view on its canvas
        position_y: Vertical pan offset of the view on its canvas
    """

    def __init__(self, name: str, dataset: Dataset, channel_axis: Optional[int] = None,
                 color_tables: Optional[Sequence[ColorTable8]] = None,
                 composite: bool = False, config: Optional[DisplayConfig] = None):
        """
        Build the view and render the initial plane.

        Args:
            name: View name
            dataset: Dataset to display
            channel_axis: Dimension holding channels, or None (negative means None)
            color_tables: One table per channel (at least one for single-lut)
            composite: Blend all channels instead of showing one at a time
            config: Display range and displayed axes

        Raises:
            ValueError: If the axes or color tables do not fit the dataset
        """
        config = config or DisplayConfig()
        if channel_axis is not None and channel_axis < 0:
            channel_axis = None

        self.name = name
        self.dataset = dataset
        self.position_x = 0
        self.position_y = 0
        self._channel_axis = channel_axis
        self._color_tables: Tuple[ColorTable8, ...] = tuple(color_tables or ())
        self._img_canvas: Optional[ImageCanvas] = None
        self._converters: List[RealARGBConverter] = []

        width = dataset.dimension(config.x_axis) if config.x_axis < dataset.num_dimensions else 0
        height = dataset.dimension(config.y_axis) if config.y_axis < dataset.num_dimensions else 0
        self._screen_image = ARGBScreenImage(width, height)

        low, high = config.display_min, config.display_max
        axes = dict(x_axis=config.x_axis, y_axis=config.y_axis)

        if channel_axis is None:
            if self._color_tables:
                self._mode = DisplayMode.SINGLE_LUT
                converter = RealLUTConverter(low, high, self._color_tables[0])
            else:
                self._mode = DisplayMode.NONE
                converter = RealARGBConverter(low, high)
            self._converters.append(converter)
            self._projector = XYProjector(dataset, self._screen_image, converter, **axes)
        else:
            self._validate_channel_axis(channel_axis, config)
            channels = dataset.dimension(channel_axis)
            if len(self._color_tables) < channels:
                raise ValueError(
                    f"Dataset has {channels} channels but only "
                    f"{len(self._color_tables)} color tables were given"
                )
            if composite:
                self._mode = DisplayMode.COMPOSITE
                self._converters.extend(CompositeLUTConverter(low, high, table)
                                        for table in self._color_tables[:channels])
                self._projector = CompositeXYProjector(dataset, self._screen_image,
                                                       self._converters, channel_axis, **axes)
            else:
                self._mode = DisplayMode.PER_PLANE_LUT
                converter = RealLUTConverter(low, high, self._color_tables[0])
                self._converters.append(converter)
                self._projector = LutXYProjector(dataset, self._screen_image, converter, **axes)

        logger.debug("Created %s view '%s' of %s", self._mode.value, name, dataset)
        self.project()

    def _validate_channel_axis(self, channel_axis: int, config: DisplayConfig) -> None:
        if channel_axis >= self.dataset.num_dimensions:
            raise ValueError(
                f"Channel axis {channel_axis} out of range for "
                f"{self.dataset.num_dimensions} dimensions"
            )
        if channel_axis in (config.x_axis, config.y_axis):
            raise ValueError(f"Channel axis {channel_axis} is a displayed axis")

    @property
    def mode(self) -> DisplayMode:
        return self._mode

    @property
    def channel_axis(self) -> Optional[int]:
        return self._channel_axis

    @property
    def color_tables(self) -> Tuple[ColorTable8, ...]:
        return self._color_tables

    @property
    def active_color_table(self) -> Optional[ColorTable8]:
        """Table used for the current plane; None in gray or composite mode."""
        if self._mode in (DisplayMode.SINGLE_LUT, DisplayMode.PER_PLANE_LUT):
            return self._projector.converter.color_table
        return None

    @property
    def screen_image(self) -> ARGBScreenImage:
        return self._screen_image

    @property
    def converters(self) -> List[RealARGBConverter]:
        return list(self._converters)

    @property
    def projector(self) -> XYProjector:
        return self._projector

    @property
    def position(self) -> Tuple[int, ...]:
        return self._projector.position

    def get_position(self, axis: int) -> int:
        return self._projector.get_position(axis)

    def set_img_canvas(self, img_canvas: Optional[ImageCanvas]) -> None:
        self._img_canvas = img_canvas

    def set_position(self, value: int, axis: int) -> None:
        """
        Move the view along a non-displayed axis.

        In per-plane-lut mode, moving along the channel axis also switches the
        active color table to the channel's table. The raster is not
        recomputed here; call :meth:`project` afterwards.

        Args:
            value: New coordinate along ``axis``
            axis: A dimension that is neither the x nor the y axis

        Raises:
            ValueError: If the axis is displayed or out of range, or value is out of range
        """
        ndim = self.dataset.num_dimensions
        if not 0 <= axis < ndim:
            raise ValueError(f"Axis {axis} out of range for {ndim} dimensions")
        if axis in (self._projector.x_axis, self._projector.y_axis):
            raise ValueError(f"Axis {axis} is a displayed axis")
        size = self.dataset.dimension(axis)
        if not 0 <= value < size:
            raise ValueError(f"Position {value} out of range [0, {size}) on axis {axis}")

        self._projector.set_position(value, axis)
        if self._mode is DisplayMode.PER_PLANE_LUT and axis == self._channel_axis:
            self._projector.set_lut(self._color_tables[value])

        # tell display components to repaint
        if self._img_canvas is not None:
            self._img_canvas.update_image()

    def project(self) -> None:
        """Recompute the whole raster from the dataset and current position."""
        self._projector.map()
