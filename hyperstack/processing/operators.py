"""
Pixel-wise binary operators for the image calculator.

Every operator maps two double precision samples to one double precision
sample. Operators are pure and total: domain edge cases produce a defined
value instead of raising (``Divide`` by zero yields 0). They accept scalars
as well as numpy arrays, evaluating element-wise, so the combiner can apply
them to a whole plane at once.

The registry is a static mapping from the closed :class:`BinaryOperation`
enumeration to operator objects, built once at import time.
"""

import logging
from typing import Any, Callable, Dict, List, Union

import numpy as np

from hyperstack.constants.constants import BinaryOperation
from hyperstack.core.exceptions import UnknownOperatorError
from hyperstack.core.memory.sample_kind import to_double

logger = logging.getLogger(__name__)

# Largest doubles that still cast to int64 without overflow
_INT64_LOW = -9.223372036854775e18
_INT64_HIGH = 9.223372036854775e18


class BinaryOperator:
    """
    A named, stateless pixel operator.

    Calling the operator with two scalars returns a Python float; calling it
    with arrays returns a float64 array of the broadcast shape.
    """

    def __init__(self, operation: BinaryOperation, func: Callable[[np.ndarray, np.ndarray], np.ndarray]):
        self.operation = operation
        self._func = func

    @property
    def name(self) -> str:
        return self.operation.value

    def __call__(self, a: Any, b: Any) -> Union[float, np.ndarray]:
        result = self._func(to_double(a), to_double(b))
        if np.ndim(result) == 0:
            return float(result)
        return result

    def __repr__(self) -> str:
        return f"BinaryOperator({self.name!r})"


def _as_int64(values: np.ndarray) -> np.ndarray:
    """Round half up to the 64-bit integer representation used by bitwise operators."""
    rounded = np.nan_to_num(np.floor(values + 0.5), nan=0.0,
                            posinf=_INT64_HIGH, neginf=_INT64_LOW)
    return np.clip(rounded, _INT64_LOW, _INT64_HIGH).astype(np.int64)


def _add(a, b):
    return a + b


def _subtract(a, b):
    return a - b


def _multiply(a, b):
    return a * b


def _divide(a, b):
    # Division by zero is defined as 0, never inf or nan
    out = np.zeros(np.broadcast(a, b).shape, dtype=np.float64)
    np.divide(a, b, out=out, where=(b != 0))
    return out


def _and(a, b):
    return (_as_int64(a) & _as_int64(b)).astype(np.float64)


def _or(a, b):
    return (_as_int64(a) | _as_int64(b)).astype(np.float64)


def _xor(a, b):
    return (_as_int64(a) ^ _as_int64(b)).astype(np.float64)


def _min(a, b):
    return np.minimum(a, b)


def _max(a, b):
    return np.maximum(a, b)


def _average(a, b):
    return (a + b) / 2.0


def _difference(a, b):
    return np.abs(a - b)


def _copy(a, b):
    return np.array(np.broadcast_arrays(a, b)[1], dtype=np.float64)


def _transparent_zero(a, b):
    # The left operand shows through wherever the right operand is zero
    return np.where(b == 0, a, b).astype(np.float64)


_OPERATION_FUNCS: Dict[BinaryOperation, Callable] = {
    BinaryOperation.ADD: _add,
    BinaryOperation.SUBTRACT: _subtract,
    BinaryOperation.MULTIPLY: _multiply,
    BinaryOperation.DIVIDE: _divide,
    BinaryOperation.AND: _and,
    BinaryOperation.OR: _or,
    BinaryOperation.XOR: _xor,
    BinaryOperation.MIN: _min,
    BinaryOperation.MAX: _max,
    BinaryOperation.AVERAGE: _average,
    BinaryOperation.DIFFERENCE: _difference,
    BinaryOperation.COPY: _copy,
    BinaryOperation.TRANSPARENT_ZERO: _transparent_zero,
}

_missing = [op.value for op in BinaryOperation if op not in _OPERATION_FUNCS]
if _missing:
    raise RuntimeError(f"No implementation registered for operations: {', '.join(_missing)}")

OPERATOR_REGISTRY: Dict[BinaryOperation, BinaryOperator] = {
    op: BinaryOperator(op, _OPERATION_FUNCS[op]) for op in BinaryOperation
}

logger.debug("Operator registry initialized with %d operators", len(OPERATOR_REGISTRY))


def lookup(name: Union[str, BinaryOperation]) -> BinaryOperator:
    """
    Resolve an operator by name.

    Args:
        name: Operation name (e.g. "Add", "Transparent-zero") or BinaryOperation

    Returns:
        The registered BinaryOperator

    Raises:
        UnknownOperatorError: If the name is not one of the calculator operations
    """
    if isinstance(name, BinaryOperation):
        return OPERATOR_REGISTRY[name]
    try:
        operation = BinaryOperation(name)
    except ValueError:
        raise UnknownOperatorError(name, available_operations()) from None
    return OPERATOR_REGISTRY[operation]


def available_operations() -> List[str]:
    """Operation names in the order they are offered to users."""
    return [op.value for op in BinaryOperation]
