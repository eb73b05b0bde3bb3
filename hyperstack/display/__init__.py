"""
Display module for hyperstack.

Projects planes of N-dimensional datasets into ARGB rasters through color
tables, one channel at a time or as a composite of all channels.
"""

from hyperstack.display.color_table import ColorTable8, pack_argb, unpack_argb
from hyperstack.display.converters import (CompositeLUTConverter,
                                           RealARGBConverter, RealLUTConverter)
from hyperstack.display.dataset_view import DatasetView, ImageCanvas
from hyperstack.display.projectors import (CompositeXYProjector,
                                           LutXYProjector, XYProjector)
from hyperstack.display.screen_image import ARGBScreenImage

__all__ = [
    "ARGBScreenImage",
    "ColorTable8",
    "CompositeLUTConverter",
    "CompositeXYProjector",
    "DatasetView",
    "ImageCanvas",
    "LutXYProjector",
    "RealARGBConverter",
    "RealLUTConverter",
    "XYProjector",
    "pack_argb",
    "unpack_argb",
]
