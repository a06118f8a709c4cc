"""
Shared helpers: rounding, number formatting and calendar name tables.
"""

import math

MONTHS = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

# Sunday-first, matching the contribution calendar's weekday numbering
DAYS = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]


def round_half_up(value: float, digits: int = 0) -> float | int:
    """
    Round a non-negative value with halves going up.

    Python's round() uses banker's rounding, so 2.5 becomes 2. Displayed
    percentages and averages expect 2.5 -> 3 and 0.25 -> 0.3.

    Args:
        value: Number to round
        digits: Decimal places to keep

    Returns:
        An int when digits is 0, otherwise a float
    """
    if digits == 0:
        return int(math.floor(value + 0.5))
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def day_name(day) -> str:
    """Return the Sunday-first weekday name for a date."""
    # date.weekday() is Monday=0
    return DAYS[(day.weekday() + 1) % 7]


def format_number(num: int) -> str:
    """
    Format a count for display, e.g. 1500 -> "1.5K".

    Args:
        num: Number to format

    Returns:
        Compact string representation
    """
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}".removesuffix(".0") + "M"
    if num >= 1000:
        return f"{num / 1000:.1f}".removesuffix(".0") + "K"
    return f"{num:,}"
