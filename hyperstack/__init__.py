"""
hyperstack: pixel arithmetic and display projection for N-dimensional images.

This module provides the public API for hyperstack. It re-exports the image
calculator and display view entry points and does NOT import anything that
allocates images or touches a display on import.
"""

import logging

__version__ = "0.1.0"


# Set up basic logging configuration if none exists
# This ensures INFO level logging works when used outside a host application
def _ensure_basic_logging():
    """Ensure basic logging is configured if no configuration exists."""
    root_logger = logging.getLogger()

    # Only configure if no handlers exist and level is too high
    if not root_logger.handlers and root_logger.level > logging.INFO:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )


# Configure basic logging on import
_ensure_basic_logging()

from hyperstack.core.dataset import Dataset, DatasetService
from hyperstack.display.dataset_view import DatasetView
from hyperstack.processing.image_calculator import ImageCalculator
from hyperstack.processing.image_combiner import combine, materialize
from hyperstack.processing.operators import lookup

__all__ = [
    # Data model
    "Dataset",
    "DatasetService",

    # Image calculator
    "ImageCalculator",
    "combine",
    "materialize",
    "lookup",

    # Display
    "DatasetView",
]
