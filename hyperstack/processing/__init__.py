"""
Image processing module for hyperstack.

This module provides the image calculator: the registry of pixel-wise binary
operators, the combiner that applies them across two images, and the
calculator command that materializes the result.
"""

from hyperstack.processing.image_calculator import ImageCalculator
from hyperstack.processing.image_combiner import (combine, copy_data_into,
                                                  materialize)
from hyperstack.processing.operators import (OPERATOR_REGISTRY, BinaryOperator,
                                             available_operations, lookup)

__all__ = [
    # Operator registry
    "OPERATOR_REGISTRY",
    "BinaryOperator",
    "available_operations",
    "lookup",

    # Combination
    "combine",
    "copy_data_into",
    "materialize",

    # Calculator command
    "ImageCalculator",
]
