"""
ARGB raster that projectors render into.
"""

import numpy as np

from hyperstack.display.color_table import unpack_argb


class ARGBScreenImage:
    """
    Flat ARGB pixel buffer of ``width x height`` packed uint32 values.

    The buffer is indexed ``data[y, x]`` and is overwritten in place by every
    projection; callers that keep a frame must copy it.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Screen image size must be positive, got {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        self._data = np.zeros((self._height, self._width), dtype=np.uint32)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def data(self) -> np.ndarray:
        return self._data

    def get(self, x: int, y: int) -> int:
        return int(self._data[y, x])

    def to_rgba(self) -> np.ndarray:
        """Copy of the raster as a (height, width, 4) uint8 RGBA array."""
        a, r, g, b = unpack_argb(self._data)
        return np.stack([r, g, b, a], axis=-1).astype(np.uint8)
