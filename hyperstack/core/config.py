"""
Global configuration dataclasses for hyperstack.

This module defines the configuration objects used by the image calculator and
the display views. Configuration is intended to be immutable and provided as
Python objects.
"""

import logging
from dataclasses import dataclass, field

from hyperstack.constants.constants import (DEFAULT_DISPLAY_MAX,
                                           DEFAULT_DISPLAY_MIN,
                                           DEFAULT_LOG_LEVEL,
                                           DEFAULT_NEW_WINDOW,
                                           DEFAULT_RESULT_NAME,
                                           DEFAULT_WANT_DOUBLES,
                                           DEFAULT_X_AXIS, DEFAULT_Y_AXIS)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculatorConfig:
    """Configuration for the image calculator's materialization policy."""
    new_window: bool = DEFAULT_NEW_WINDOW
    """Write the result into a new image instead of replacing input 1."""

    want_doubles: bool = DEFAULT_WANT_DOUBLES
    """Materialize the result as double precision. Takes precedence over in-place replacement."""

    result_name: str = DEFAULT_RESULT_NAME
    """Name given to newly allocated result images."""


@dataclass(frozen=True)
class DisplayConfig:
    """Configuration for dataset views."""
    display_min: float = DEFAULT_DISPLAY_MIN
    """Sample value mapped to the darkest display level / first color table entry."""

    display_max: float = DEFAULT_DISPLAY_MAX
    """Sample value mapped to the brightest display level / last color table entry."""

    x_axis: int = DEFAULT_X_AXIS
    """Image dimension scanned along the raster width."""

    y_axis: int = DEFAULT_Y_AXIS
    """Image dimension scanned along the raster height."""

    def __post_init__(self):
        if self.display_max <= self.display_min:
            raise ValueError(
                f"display_max ({self.display_max}) must be greater than "
                f"display_min ({self.display_min})"
            )
        if self.x_axis == self.y_axis:
            raise ValueError(f"x_axis and y_axis must differ, both are {self.x_axis}")


@dataclass(frozen=True)
class GlobalConfig:
    """Root configuration object for hyperstack."""
    calculator: CalculatorConfig = field(default_factory=CalculatorConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    log_level: str = DEFAULT_LOG_LEVEL
    """Logging level applied by :func:`configure_logging`."""


def get_default_global_config() -> GlobalConfig:
    """Provides a default instance of GlobalConfig."""
    return GlobalConfig()


def configure_logging(config: GlobalConfig) -> None:
    """Apply the configured log level to the hyperstack logger hierarchy."""
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.log_level}")
    logging.getLogger("hyperstack").setLevel(level)
    logger.debug("hyperstack log level set to %s", config.log_level.upper())
