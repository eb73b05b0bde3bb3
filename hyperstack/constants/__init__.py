from hyperstack.constants.constants import (Axis, BinaryOperation,
                                           DisplayMode, SPATIAL_AXES)

__all__ = [
    "Axis",
    "BinaryOperation",
    "DisplayMode",
    "SPATIAL_AXES",
]
