"""
Consolidated constants for hyperstack.

This module defines the closed enumerations shared by the image calculator and
the display layer (axis labels, binary operations, display modes) together with
the default values used by the configuration dataclasses.
"""

from enum import Enum
from typing import List, Set


class Axis(Enum):
    """Semantic label of an image dimension."""
    X = "X"
    Y = "Y"
    Z = "Z"
    CHANNEL = "Channel"
    TIME = "Time"
    UNKNOWN = "Unknown"


SPATIAL_AXES: Set[Axis] = {Axis.X, Axis.Y}

# Default axis labels for an image of a given rank: X, Y, then Z, Channel, Time
DEFAULT_AXIS_ORDER: List[Axis] = [Axis.X, Axis.Y, Axis.Z, Axis.CHANNEL, Axis.TIME]


class BinaryOperation(Enum):
    """Pixel-wise operations offered by the image calculator.

    The value is the stable name shown to users and accepted by
    :func:`hyperstack.processing.operators.lookup`.
    """
    ADD = "Add"
    SUBTRACT = "Subtract"
    MULTIPLY = "Multiply"
    DIVIDE = "Divide"
    AND = "AND"
    OR = "OR"
    XOR = "XOR"
    MIN = "Min"
    MAX = "Max"
    AVERAGE = "Average"
    DIFFERENCE = "Difference"
    COPY = "Copy"
    TRANSPARENT_ZERO = "Transparent-zero"


VALID_OPERATION_NAMES = {op.value for op in BinaryOperation}


class DisplayMode(Enum):
    """Projection strategy of a dataset view, fixed at construction."""
    NONE = "none"                    # direct gray mapping, no color table
    SINGLE_LUT = "single-lut"        # one color table for the whole image
    COMPOSITE = "composite"          # all channels blended into each pixel
    PER_PLANE_LUT = "per-plane-lut"  # color table follows the channel position


# Calculator defaults
DEFAULT_NEW_WINDOW = True
DEFAULT_WANT_DOUBLES = False
DEFAULT_RESULT_NAME = "Result of operation"

# Display defaults
DEFAULT_DISPLAY_MIN = 0.0
DEFAULT_DISPLAY_MAX = 255.0
DEFAULT_X_AXIS = 0
DEFAULT_Y_AXIS = 1
COLOR_TABLE_LENGTH = 256
OPAQUE_ALPHA = 0xFF

DEFAULT_LOG_LEVEL = "INFO"
