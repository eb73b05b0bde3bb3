"""
Pixel-wise combination of two images.

:func:`combine` applies a binary operator across two same-shaped datasets and
returns a freshly allocated double precision result. :func:`materialize` then
writes that result into its final home: either back into the first input
(in place, narrowed to the input's sample kind) or into a newly allocated
dataset.

Both functions walk the image plane by plane (see
:func:`hyperstack.core.coordinate_space.iter_planes`) and evaluate each plane
with vectorised numpy operations.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from hyperstack.constants.constants import DEFAULT_RESULT_NAME
from hyperstack.core.coordinate_space import CoordinateSpace, iter_planes
from hyperstack.core.dataset import Dataset, DatasetService
from hyperstack.core.exceptions import ShapeMismatchError
from hyperstack.core.memory.sample_kind import (SampleKind, from_double,
                                               to_double)
from hyperstack.processing.operators import BinaryOperator

logger = logging.getLogger(__name__)


def validate_same_shape(input1: Dataset, input2: Dataset) -> None:
    """
    Check that two datasets can be combined sample by sample.

    Raises:
        ShapeMismatchError: If the dimension counts or sizes differ
    """
    if input1.dimensions != input2.dimensions:
        raise ShapeMismatchError(input1.dimensions, input2.dimensions)


def combine(input1: Dataset, input2: Dataset, operator: BinaryOperator) -> Dataset:
    """
    Combine two datasets sample by sample.

    Neither input is modified. The result always holds double precision
    samples, whatever the input kinds, so no intermediate value is clipped.

    Args:
        input1: Left operand image
        input2: Right operand image
        operator: Operator applied as ``operator(sample1, sample2)``

    Returns:
        New FLOAT64 dataset with input1's dimensions and axes

    Raises:
        ShapeMismatchError: If the inputs differ in shape
    """
    validate_same_shape(input1, input2)

    dimensions = input1.dimensions
    result = Dataset(np.empty(dimensions, dtype=SampleKind.FLOAT64.dtype),
                     name=DEFAULT_RESULT_NAME, axes=input1.axes)

    for index in iter_planes(dimensions):
        plane1 = to_double(input1.data[index])
        plane2 = to_double(input2.data[index])
        result.data[index] = operator(plane1, plane2)

    logger.debug("Combined %s with %s using %s", input1.name, input2.name, operator.name)
    return result


def last_point(dimensions: Sequence[int]):
    """Inclusive last index of every axis (size - 1)."""
    return [int(d) - 1 for d in dimensions]


def copy_data_into(destination: Dataset, source: Dataset, dimensions: Sequence[int]) -> None:
    """
    Copy ``source`` into ``destination``, converting to the destination's kind.

    The copied region runs from 0 to ``dimension - 1`` on every axis. Values
    that do not fit the destination kind are rounded and clamped, never
    rejected.

    Args:
        destination: Dataset receiving the values
        source: Dataset providing the values
        dimensions: Size of each axis of the region to copy
    """
    space = CoordinateSpace.from_bounds([0] * len(dimensions), last_point(dimensions))
    region = space.slices()
    kind = destination.sample_kind

    for index in iter_planes(space.span):
        # plane index relative to the region, applied to both images
        target = tuple(r if isinstance(i, slice) else r.start + i for r, i in zip(region, index))
        destination.data[target] = from_double(to_double(source.data[target]), kind)


def materialize(result: Dataset, input1: Dataset, new_window: bool, want_doubles: bool,
                dataset_service: DatasetService,
                name: str = DEFAULT_RESULT_NAME) -> Optional[Dataset]:
    """
    Write a computed result into its destination image.

    Policy:
        - ``not want_doubles and not new_window``: overwrite input1 in place
          and notify its listeners; no dataset is returned.
        - otherwise: allocate a new dataset shaped like input1, with input1's
          sample kind, or double precision when ``want_doubles`` is set.
          ``want_doubles`` takes precedence over in-place replacement.

    Args:
        result: Double precision result of :func:`combine`
        input1: First operand of the combination
        new_window: Whether a new dataset was requested
        want_doubles: Whether a double precision result was requested
        dataset_service: Factory used to allocate the new dataset
        name: Name of a newly allocated dataset

    Returns:
        The new dataset, or None when input1 was replaced in place
    """
    dimensions = result.dimensions

    if not want_doubles and not new_window:
        logger.info("Replacing '%s' in place with operation result", input1.name)
        copy_data_into(input1, result, dimensions)
        input1.update()
        return None

    bits = input1.bits_per_pixel
    floating = not input1.is_integer
    signed = input1.is_signed
    if want_doubles:
        bits = 64
        floating = True
        signed = True

    output = dataset_service.create(dimensions, name, input1.axes, bits, signed, floating)
    logger.info("Writing operation result to new dataset '%s' (%s)",
                output.name, output.sample_kind.value)
    copy_data_into(output, result, dimensions)
    output.update()
    return output
