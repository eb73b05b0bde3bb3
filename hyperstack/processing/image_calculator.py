"""
Image calculator command.

Fills an output dataset with a combination of two input datasets. The
combination is selected by name (Add, Min, Average, ...). Two flags decide
where the result lands:

- ``new_window``: write into a newly allocated dataset instead of input 1
- ``want_doubles``: allocate the new dataset with double precision samples

Mismatched input shapes do not raise out of :meth:`ImageCalculator.run`; the
command cancels itself and exposes the reason through the Cancelable surface.
"""

import logging
from typing import List, Optional

from hyperstack.core.config import CalculatorConfig
from hyperstack.core.dataset import Dataset, DatasetService
from hyperstack.core.exceptions import ShapeMismatchError
from hyperstack.processing.image_combiner import combine, materialize
from hyperstack.processing.operators import available_operations, lookup

logger = logging.getLogger(__name__)


class ImageCalculator:
    """
    Combines two datasets with a user selected binary operation.

    Attributes:
        input1: Left operand; also the destination for in-place replacement
        input2: Right operand
        op_name: Name of the operation (one of :meth:`choices`)
        new_window: Create a new dataset for the result
        want_doubles: Produce a double precision result
        output: Result dataset after :meth:`run`, or None if input1 was replaced
    """

    def __init__(self, dataset_service: Optional[DatasetService] = None,
                 config: Optional[CalculatorConfig] = None):
        config = config or CalculatorConfig()
        self.dataset_service = dataset_service or DatasetService()
        self.result_name = config.result_name
        self.input1: Optional[Dataset] = None
        self.input2: Optional[Dataset] = None
        self.op_name: Optional[str] = None
        self.new_window: bool = config.new_window
        self.want_doubles: bool = config.want_doubles
        self._output: Optional[Dataset] = None
        self._cancel_reason: Optional[str] = None

    @staticmethod
    def choices() -> List[str]:
        """Operation names offered by the calculator."""
        return available_operations()

    @property
    def output(self) -> Optional[Dataset]:
        return self._output

    def run(self) -> None:
        """
        Combine input1 and input2 and materialize the result.

        Raises:
            ValueError: If an input has not been set
            UnknownOperatorError: If op_name is not a calculator operation
        """
        if self.input1 is None or self.input2 is None:
            raise ValueError("Both input datasets must be set before running the calculator")

        self._cancel_reason = None
        self._output = None
        operator = lookup(self.op_name)

        try:
            result = combine(self.input1, self.input2, operator)
        except ShapeMismatchError as e:
            logger.warning("Image calculator canceled: %s", e)
            self._cancel_reason = str(e)
            return

        self._output = materialize(result, self.input1, self.new_window, self.want_doubles,
                                   self.dataset_service, name=self.result_name)

    def is_canceled(self) -> bool:
        return self._cancel_reason is not None

    def get_cancel_reason(self) -> Optional[str]:
        return self._cancel_reason
