"""Validation utilities."""

import math
from paramscale.core.exceptions import ParamRangeError
from paramscale.utils.log import get_logger

logger = get_logger(__name__)


def clamp(value: float, bound_a: float, bound_b: float) -> float:
    """Clamp a value between two bounds given in either order."""
    low, high = (bound_a, bound_b) if bound_a <= bound_b else (bound_b, bound_a)
    if value < low:
        logger.debug(f"Clamping {value} to {low}")
        return low
    if value > high:
        logger.debug(f"Clamping {value} to {high}")
        return high
    return value


def clamp_unsigned_norm(t: float) -> float:
    """Clamp an unsigned normalized value to [0.0, 1.0]."""
    return clamp(t, 0.0, 1.0)


def clamp_signed_norm(t: float) -> float:
    """Clamp a signed normalized value to [-1.0, 1.0]."""
    return clamp(t, -1.0, 1.0)


def check_linear_range(minimum: float, maximum: float) -> None:
    """
    Check that [minimum, maximum] can be normalized.

    Raises:
        ParamRangeError: If a bound is not finite or the range has zero width.
    """
    if not (math.isfinite(minimum) and math.isfinite(maximum)):
        logger.warning(f"Rejected non-finite range [{minimum}, {maximum}]")
        raise ParamRangeError("bounds must be finite", minimum, maximum)
    if minimum == maximum:
        logger.warning(f"Rejected zero-width range [{minimum}, {maximum}]")
        raise ParamRangeError("range has zero width", minimum, maximum)


def check_log_range(minimum: float, maximum: float) -> None:
    """
    Check that [minimum, maximum] can be used on a logarithmic scale.

    Raises:
        ParamRangeError: If the range fails :func:`check_linear_range` or a
            bound is not positive.
    """
    check_linear_range(minimum, maximum)
    if minimum <= 0 or maximum <= 0:
        logger.warning(f"Rejected non-positive log range [{minimum}, {maximum}]")
        raise ParamRangeError("log scale bounds must be positive", minimum, maximum)
