"""
Per-channel conversion of samples into display colors.

Each converter maps samples from a configured ``[min, max]`` range onto the
8-bit display index ``0..255``:

    index = min(255, round(max(0, (value - min) / (max - min) * 255)))

and turns the index into a color:

- :class:`RealARGBConverter`: opaque gray level (no color table)
- :class:`RealLUTConverter`: entry of a color table
- :class:`CompositeLUTConverter`: RGB contribution of one channel to a
  composite pixel

Converters work on scalars and on whole planes (numpy arrays).
"""

import logging
from typing import Any

import numpy as np

from hyperstack.constants.constants import OPAQUE_ALPHA
from hyperstack.core.memory.sample_kind import to_double
from hyperstack.display.color_table import ColorTable8, pack_argb

logger = logging.getLogger(__name__)


def _scalar_or_array(result: np.ndarray) -> Any:
    if np.ndim(result) == 0:
        return int(result)
    return result


class RealARGBConverter:
    """Linear gray-level mapping of samples in ``[min, max]``."""

    def __init__(self, min_value: float, max_value: float):
        if max_value <= min_value:
            raise ValueError(f"max ({max_value}) must be greater than min ({min_value})")
        self.min = float(min_value)
        self.max = float(max_value)

    def display_index(self, values: Any) -> np.ndarray:
        """Map samples to display indices in 0..255 (NaN maps to 0)."""
        scaled = (to_double(values) - self.min) / (self.max - self.min) * 255.0
        scaled = np.nan_to_num(scaled, nan=0.0, posinf=255.0, neginf=0.0)
        index = np.floor(np.maximum(0.0, scaled) + 0.5)
        return np.minimum(255, index).astype(np.intp)

    def convert(self, values: Any) -> Any:
        """ARGB value(s) for the given sample(s)."""
        level = self.display_index(values)
        return _scalar_or_array(pack_argb(OPAQUE_ALPHA, level, level, level))


class RealLUTConverter(RealARGBConverter):
    """Maps samples through a color table."""

    def __init__(self, min_value: float, max_value: float, color_table: ColorTable8):
        super().__init__(min_value, max_value)
        self.color_table = color_table

    def set_color_table(self, color_table: ColorTable8) -> None:
        self.color_table = color_table

    def convert(self, values: Any) -> Any:
        return self.color_table.argb(self.display_index(values))


class CompositeLUTConverter(RealLUTConverter):
    """
    One channel's converter in a composite view.

    :meth:`contribution` returns the channel's RGB color for each sample;
    the projector sums contributions of all channels.
    """

    def contribution(self, values: Any) -> np.ndarray:
        """RGB components (int) of the given sample(s), stacked on a trailing axis."""
        return self.color_table.rgb(self.display_index(values)).astype(np.int64)
