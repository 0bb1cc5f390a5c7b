"""
Numeric helpers shared by the indicator library and the bindings.
"""

import math
import sys

DEFAULT_PRECISION = 4


def round_to(value: float, precision: int = DEFAULT_PRECISION) -> float:
    """
    Round half away from zero at a fixed number of decimals.

    Scales by 10**precision, rounds, and scales back. Python's round() uses
    banker's rounding and would disagree with the other runtimes on ties.
    """
    if not math.isfinite(value):
        return value
    try:
        multiplier = 10.0 ** precision
    except OverflowError:
        # More decimals than a double holds: already exact
        return value
    if multiplier == 0.0:
        return math.copysign(0.0, value)
    scaled = value * multiplier
    if not math.isfinite(scaled):
        # Magnitude this large carries no fractional digits
        return value
    rounded = math.floor(abs(scaled) + 0.5)
    # floor(x + 0.5) overshoots when x is the largest double below .5
    if rounded - abs(scaled) > 0.5:
        rounded -= 1
    return math.copysign(rounded, scaled) / multiplier


def percent_change(old_value: float, new_value: float) -> float:
    """Percent change from old to new; 0.0 when old is zero."""
    if old_value == 0.0:
        return 0.0
    return ((new_value - old_value) / old_value) * 100


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    if abs(denominator) < sys.float_info.epsilon:
        return default
    return numerator / denominator
