"""Shared pytest fixtures for the hyperstack test suite."""
import logging

import numpy as np
import pytest

from hyperstack.constants.constants import Axis
from hyperstack.core.dataset import Dataset, DatasetService

# Disable lengthy logging from components during tests
logging.disable(logging.CRITICAL)


@pytest.fixture
def dataset_service():
    return DatasetService()


@pytest.fixture
def constant_dataset():
    """Factory for datasets filled with a single value."""
    def _make(value, shape=(2, 2), dtype=np.uint8, name="constant", axes=None):
        return Dataset(np.full(shape, value, dtype=dtype), name=name, axes=axes)
    return _make


@pytest.fixture
def two_channel_stack():
    """4x4 image with 2 channels, indexed data[x, y, c], distinct values per pixel."""
    data = np.zeros((4, 4, 2), dtype=np.uint8)
    for x in range(4):
        for y in range(4):
            data[x, y, 0] = 10 * x + y
            data[x, y, 1] = 200 - (10 * y + x)
    return Dataset(data, name="two channels", axes=[Axis.X, Axis.Y, Axis.CHANNEL])


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
