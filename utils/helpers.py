"""
Helper utilities for Dynamic Footsteps.

Contains clamping, rounding and lenient value conversion used
across multiple modules.
"""

import math


def clamp(value, low, high):
    """Clamp a value into the closed range [low, high].

    Args:
        value: Value to clamp
        low: Lower bound
        high: Upper bound

    Returns:
        The clamped value
    """
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Python's round() uses banker's rounding, which would make 92.5 -> 92
    but 93.5 -> 94.
    """
    return int(math.floor(value + 0.5))


def to_int(value, default: int = 0) -> int:
    """Convert a loosely typed parameter value to an int.

    Accepts ints, floats and numeric strings. Anything empty or
    unparseable yields the default.

    Args:
        value: Raw parameter value
        default: Value used when conversion fails

    Returns:
        Integer value
    """
    if value is None or value == '':
        return default
    if isinstance(value, bool):
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return int(number)


def to_bool(value, default: bool = False) -> bool:
    """Convert a loosely typed parameter value to a bool.

    Strings compare against 'true' (case-insensitive); the plugin
    parameter format stores booleans as text.
    """
    if value is None or value == '':
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == 'true'
    return bool(value)
