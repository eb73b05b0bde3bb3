"""
8-bit color lookup tables.

A :class:`ColorTable8` maps an 8-bit display index (0..255) to a color. Tables
hold 3 (RGB) or 4 (RGBA) byte components per entry and are immutable once
built. Helper constructors provide the standard ramp tables (gray, primary
and secondary colors) used to tint fluorescence channels.
"""

from typing import Any, Tuple

import numpy as np

from hyperstack.constants.constants import COLOR_TABLE_LENGTH, OPAQUE_ALPHA


def pack_argb(a: Any, r: Any, g: Any, b: Any) -> Any:
    """Pack byte components into 32-bit ARGB values (scalars or arrays)."""
    a, r, g, b = (np.asarray(c, dtype=np.uint32) for c in (a, r, g, b))
    packed = (a << 24) | (r << 16) | (g << 8) | b
    if np.ndim(packed) == 0:
        return int(packed)
    return packed


def unpack_argb(argb: Any) -> Tuple[Any, Any, Any, Any]:
    """Split 32-bit ARGB values into (a, r, g, b) byte components."""
    argb = np.asarray(argb, dtype=np.uint32)
    components = tuple((argb >> shift) & 0xFF for shift in (24, 16, 8, 0))
    if argb.ndim == 0:
        return tuple(int(c) for c in components)
    return components


class ColorTable8:
    """
    Immutable 256-entry color table with 8-bit components.

    Attributes:
        values: Read-only uint8 array of shape (components, 256)
        components: 3 for RGB tables, 4 for RGBA tables
    """

    def __init__(self, values: Any):
        """
        Build a color table from per-component byte ramps.

        Args:
            values: Array-like of shape (3, 256) or (4, 256), components in
                R, G, B[, A] order, each entry in 0..255

        Raises:
            ValueError: If the shape or value range is wrong
        """
        raw = np.asarray(values)
        if raw.ndim != 2 or raw.shape[0] not in (3, 4) or raw.shape[1] != COLOR_TABLE_LENGTH:
            raise ValueError(
                f"Color table must have shape (3, {COLOR_TABLE_LENGTH}) or "
                f"(4, {COLOR_TABLE_LENGTH}), got {raw.shape}"
            )
        if raw.size and (raw.min() < 0 or raw.max() > 255):
            raise ValueError("Color table entries must be in 0..255")
        if not np.issubdtype(raw.dtype, np.integer) and not np.array_equal(raw, np.round(raw)):
            raise ValueError("Color table entries must be integers")

        table = raw.astype(np.uint8)
        table.setflags(write=False)
        self._values = table

        alpha = table[3] if table.shape[0] == 4 else np.full(COLOR_TABLE_LENGTH, OPAQUE_ALPHA)
        argb = pack_argb(alpha, table[0], table[1], table[2])
        argb.setflags(write=False)
        self._argb = argb

    @property
    def values(self) -> np.ndarray:
        return self._values

    @property
    def components(self) -> int:
        return self._values.shape[0]

    @property
    def length(self) -> int:
        return COLOR_TABLE_LENGTH

    def get(self, component: int, index: int) -> int:
        return int(self._values[component, index])

    def argb(self, index: Any) -> Any:
        """ARGB value(s) of the entry (or array of entries) at ``index``."""
        result = self._argb[np.asarray(index, dtype=np.intp)]
        if np.ndim(result) == 0:
            return int(result)
        return result

    def rgb(self, index: Any) -> np.ndarray:
        """RGB components of the entries at ``index``, stacked on a trailing axis."""
        index = np.asarray(index, dtype=np.intp)
        return np.stack([self._values[c][index] for c in range(3)], axis=-1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorTable8):
            return NotImplemented
        return np.array_equal(self._values, other._values)

    def __hash__(self) -> int:
        return hash(self._values.tobytes())

    def __repr__(self) -> str:
        last = tuple(int(v) for v in self._values[:, -1])
        return f"ColorTable8(components={self.components}, last_entry={last})"


def ramp(red: bool, green: bool, blue: bool) -> ColorTable8:
    """Linear ramp from black to the color made of the selected primaries."""
    ramp_values = np.arange(COLOR_TABLE_LENGTH, dtype=np.uint8)
    zeros = np.zeros(COLOR_TABLE_LENGTH, dtype=np.uint8)
    return ColorTable8([ramp_values if on else zeros for on in (red, green, blue)])


def gray() -> ColorTable8:
    return ramp(True, True, True)


def red() -> ColorTable8:
    return ramp(True, False, False)


def green() -> ColorTable8:
    return ramp(False, True, False)


def blue() -> ColorTable8:
    return ramp(False, False, True)


def cyan() -> ColorTable8:
    return ramp(False, True, True)


def magenta() -> ColorTable8:
    return ramp(True, False, True)


def yellow() -> ColorTable8:
    return ramp(True, True, False)
