"""
Sample kind handling for hyperstack.

Every image stores its samples in one fixed numeric representation (the
*sample kind*). Pixel arithmetic never works on that representation directly:
values are widened to double precision when read and narrowed back into the
sample kind when written. This module owns both directions of that
conversion so the rest of the code base can stay kind-agnostic.

Narrowing rules for integer kinds:
- values are rounded half up (``floor(v + 0.5)``)
- values are clamped to the range of the kind
- NaN becomes 0

Floating kinds keep fractions; finite values are clamped to the kind's
range, so float32 never overflows to +/-inf. NaN and infinities pass through.
"""

import logging
from enum import Enum
from typing import Any, Dict, Tuple, Union

import numpy as np

from hyperstack.core.exceptions import SampleKindError

logger = logging.getLogger(__name__)


class SampleKind(Enum):
    """Numeric representation of image samples."""
    INT8 = "int8"
    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(self.value)

    @property
    def bits(self) -> int:
        return self.dtype.itemsize * 8

    @property
    def floating(self) -> bool:
        return self.dtype.kind == "f"

    @property
    def signed(self) -> bool:
        return self.dtype.kind in ("i", "f")

    @property
    def is_integer(self) -> bool:
        return not self.floating

    @property
    def min_value(self) -> float:
        if self.floating:
            return float(np.finfo(self.dtype).min)
        return float(np.iinfo(self.dtype).min)

    @property
    def max_value(self) -> float:
        if self.floating:
            return float(np.finfo(self.dtype).max)
        return float(np.iinfo(self.dtype).max)

    @classmethod
    def from_properties(cls, bits: int, signed: bool, floating: bool) -> "SampleKind":
        """
        Resolve a sample kind from bit depth, signedness and float-ness.

        Args:
            bits: Bits per sample (8, 16, 32 or 64)
            signed: Whether the kind is signed (ignored for floating kinds)
            floating: Whether the kind is floating point

        Returns:
            The matching SampleKind

        Raises:
            SampleKindError: If no kind matches the combination
        """
        key = (int(bits), bool(signed) or bool(floating), bool(floating))
        kind = _KINDS_BY_PROPERTIES.get(key)
        if kind is None:
            raise SampleKindError(
                f"Unsupported sample kind: bits={bits}, signed={signed}, floating={floating}"
            )
        return kind

    @classmethod
    def from_dtype(cls, dtype: Any) -> "SampleKind":
        """
        Resolve the sample kind of a numpy dtype.

        Raises:
            SampleKindError: If the dtype is not a supported numeric kind
        """
        try:
            return cls(np.dtype(dtype).name)
        except (TypeError, ValueError) as e:
            raise SampleKindError(f"Unsupported sample dtype: {dtype}") from e


_KINDS_BY_PROPERTIES: Dict[Tuple[int, bool, bool], SampleKind] = {
    (kind.bits, kind.signed, kind.floating): kind for kind in SampleKind
}


def to_double(values: Any) -> np.ndarray:
    """Widen samples of any kind to double precision."""
    return np.asarray(values, dtype=np.float64)


def from_double(values: Any, kind: SampleKind) -> np.ndarray:
    """
    Narrow double precision values into a sample kind.

    Never raises for out-of-range or non-finite values; they are rounded and
    clamped according to the module rules.

    Args:
        values: Scalar or array of values
        kind: Destination sample kind

    Returns:
        Array of dtype ``kind.dtype`` (a numpy scalar for scalar input)
    """
    doubles = to_double(values)
    low, high = kind.min_value, kind.max_value
    if kind.floating:
        clamped = np.where(np.isfinite(doubles), np.clip(doubles, low, high), doubles)
        return clamped.astype(kind.dtype)

    rounded = np.floor(doubles + 0.5)
    rounded = np.nan_to_num(rounded, nan=0.0, posinf=high, neginf=low)
    return np.clip(rounded, low, high).astype(kind.dtype)


def narrow_scalar(value: float, kind: SampleKind) -> Union[int, float]:
    """Narrow a single value and return it as a Python number."""
    return from_double(value, kind).item()
