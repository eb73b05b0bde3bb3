"""
Custom exceptions for the hyperstack core system.
Ensures that errors are specific and fail loudly.
"""


class HyperstackError(Exception):
    """Base class for all hyperstack custom exceptions."""
    pass


class InvalidRegionError(HyperstackError, ValueError):
    """Raised when a coordinate region has a non-positive span on some axis."""
    pass


class UnknownOperatorError(HyperstackError, KeyError):
    """Raised when an operator name is not one of the calculator operations."""

    def __init__(self, name, valid_names):
        self.name = name
        self.valid_names = list(valid_names)
        super().__init__(
            f"Unknown operator '{name}'. "
            f"Valid operators are: {', '.join(self.valid_names)}"
        )

    def __str__(self):
        # KeyError would otherwise quote the whole message
        return self.args[0]


class ShapeMismatchError(HyperstackError, ValueError):
    """Raised when two images that must be combined have different shapes.

    This is an expected, user-facing condition: the image calculator turns it
    into a cancellation instead of propagating it.
    """

    def __init__(self, shape1, shape2):
        self.shape1 = tuple(shape1)
        self.shape2 = tuple(shape2)
        super().__init__(
            f"Input images have different dimensions: "
            f"{list(self.shape1)} vs {list(self.shape2)}"
        )


class SampleKindError(HyperstackError, ValueError):
    """Raised when a numeric sample kind cannot be resolved."""
    pass
