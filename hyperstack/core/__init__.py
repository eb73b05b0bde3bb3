"""Core module for hyperstack."""

# These imports are re-exported through __all__
from hyperstack.core.coordinate_space import CoordinateSpace
from hyperstack.core.dataset import Dataset, DatasetService

__all__ = [
    'CoordinateSpace',
    'Dataset',
    'DatasetService',
]
