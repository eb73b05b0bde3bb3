"""
Tests for sample to ARGB converters.
"""
import math

import numpy as np
import pytest

from hyperstack.display import color_table
from hyperstack.display.converters import (CompositeLUTConverter,
                                           RealARGBConverter, RealLUTConverter)


class TestRealARGBConverter:

    @pytest.mark.parametrize("value,expected", [
        (0.0, 0xFF000000),
        (255.0, 0xFFFFFFFF),
        (-10.0, 0xFF000000),
        (1000.0, 0xFFFFFFFF),
        (math.nan, 0xFF000000),
    ])
    def test_gray_levels(self, value, expected):
        assert RealARGBConverter(0, 255).convert(value) == expected

    def test_range_scaling_rounds(self):
        # 50 of 0..100 maps to 127.5, rounded half up to 128
        assert RealARGBConverter(0, 100).convert(50.0) == 0xFF808080

    def test_invalid_range(self):
        with pytest.raises(ValueError):
            RealARGBConverter(10, 10)

    def test_array_conversion(self):
        result = RealARGBConverter(0, 255).convert(np.array([[0, 255], [1, 2]], dtype=np.uint8))
        assert result.dtype == np.uint32
        assert result.tolist() == [[0xFF000000, 0xFFFFFFFF], [0xFF010101, 0xFF020202]]


class TestLUTConverters:

    def test_lut_lookup(self):
        converter = RealLUTConverter(0, 255, color_table.red())
        assert converter.convert(255.0) == 0xFFFF0000
        assert converter.convert(16.0) == 0xFF100000

    def test_set_color_table(self):
        converter = RealLUTConverter(0, 255, color_table.red())
        converter.set_color_table(color_table.blue())
        assert converter.convert(255.0) == 0xFF0000FF

    def test_display_range_applies_before_lookup(self):
        converter = RealLUTConverter(0, 1000, color_table.green())
        assert converter.convert(1000.0) == 0xFF00FF00
        assert converter.convert(2000.0) == 0xFF00FF00

    def test_composite_contribution(self):
        converter = CompositeLUTConverter(0, 255, color_table.yellow())
        contribution = converter.contribution(np.array([[10, 20], [30, 40]]))
        assert contribution.shape == (2, 2, 3)
        assert contribution[1, 0].tolist() == [30, 30, 0]
