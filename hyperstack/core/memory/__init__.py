"""
Memory module for hyperstack.

This module provides the sample kind tag and the conversions between a
sample kind and the canonical double precision representation used by all
pixel arithmetic.
"""

from .sample_kind import SampleKind, from_double, narrow_scalar, to_double

__all__ = [
    'SampleKind',
    'from_double',
    'narrow_scalar',
    'to_double',
]
