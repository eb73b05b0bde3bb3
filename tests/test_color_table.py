"""
Tests for color tables and ARGB packing.
"""
import numpy as np
import pytest

from hyperstack.display import color_table
from hyperstack.display.color_table import ColorTable8, pack_argb, unpack_argb


class TestPacking:

    def test_pack_scalar(self):
        assert pack_argb(0xFF, 0x12, 0x34, 0x56) == 0xFF123456

    def test_unpack_scalar(self):
        assert unpack_argb(0x80FF0001) == (0x80, 0xFF, 0x00, 0x01)

    def test_pack_arrays(self):
        packed = pack_argb(255, np.array([1, 2]), np.array([3, 4]), np.array([5, 6]))
        assert packed.dtype == np.uint32
        assert packed.tolist() == [0xFF010305, 0xFF020406]


class TestColorTable8:

    def test_rejects_wrong_length(self):
        with pytest.raises(ValueError):
            ColorTable8(np.zeros((3, 255)))

    def test_rejects_wrong_component_count(self):
        with pytest.raises(ValueError):
            ColorTable8(np.zeros((2, 256)))

    def test_rejects_fractional_entries(self):
        values = np.zeros((3, 256))
        values[0, 7] = 127.6
        with pytest.raises(ValueError):
            ColorTable8(values)

    def test_accepts_integral_floats(self):
        table = ColorTable8(np.full((3, 256), 12.0))
        assert table.get(2, 0) == 12

    def test_rejects_out_of_range_entries(self):
        values = np.zeros((3, 256), dtype=np.int32)
        values[1, 4] = 256
        with pytest.raises(ValueError):
            ColorTable8(values)

    def test_is_immutable(self):
        table = color_table.gray()
        assert not table.values.flags.writeable
        with pytest.raises(ValueError):
            table.values[0, 0] = 1

    def test_source_array_changes_do_not_leak(self):
        values = np.zeros((3, 256), dtype=np.uint8)
        table = ColorTable8(values)
        values[0, 10] = 99
        assert table.get(0, 10) == 0

    def test_gray_entries(self):
        table = color_table.gray()
        assert table.components == 3
        assert table.length == 256
        assert table.argb(0) == 0xFF000000
        assert table.argb(128) == 0xFF808080
        assert table.argb(255) == 0xFFFFFFFF

    def test_rgba_table_uses_alpha(self):
        values = np.zeros((4, 256), dtype=np.uint8)
        values[0, 5] = 0x11
        values[3, 5] = 0x40
        assert ColorTable8(values).argb(5) == 0x40110000

    @pytest.mark.parametrize("factory,expected", [
        (color_table.red, 0xFFFF0000),
        (color_table.green, 0xFF00FF00),
        (color_table.blue, 0xFF0000FF),
        (color_table.cyan, 0xFF00FFFF),
        (color_table.magenta, 0xFFFF00FF),
        (color_table.yellow, 0xFFFFFF00),
    ])
    def test_builtin_tables(self, factory, expected):
        assert factory().argb(255) == expected
        assert factory().argb(0) == 0xFF000000

    def test_array_lookup(self):
        table = color_table.red()
        np.testing.assert_array_equal(table.argb(np.array([[0, 1]])), [[0xFF000000, 0xFF010000]])
        np.testing.assert_array_equal(table.rgb(np.array([7, 9])), [[7, 0, 0], [9, 0, 0]])

    def test_equality(self):
        assert color_table.green() == color_table.green()
        assert color_table.green() != color_table.red()
        assert hash(color_table.blue()) == hash(color_table.blue())
