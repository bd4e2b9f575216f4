"""
Numeric helpers shared by calculation functions.

Each helper resolves a domain edge (zero divisor, rate below -100%, overflow)
to a defined float so that calculation functions stay total over finite input.
"""

import math


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """numerator / denominator, or ``default`` when the denominator is zero."""
    if denominator == 0:
        return default
    return numerator / denominator


def growth_factor(rate: float, periods: float) -> float:
    """
    (1 + rate) ** periods for a fractional rate (0.07 for 7%).

    A rate at or below -100% wipes the value out and yields 0.0.
    Overflow yields +inf.
    """
    base = 1.0 + rate
    if base <= 0:
        return 0.0
    try:
        return base ** periods
    except OverflowError:
        return math.inf


def annualized_percent(ratio: float, years: float) -> float:
    """
    Annualized growth, in percent, for a total growth ratio over ``years``.

    Zero or negative periods yield 0.0. A non-positive ratio (everything
    lost) yields -100.0.
    """
    if years <= 0:
        return 0.0
    if ratio <= 0:
        return -100.0
    return (growth_factor(ratio - 1.0, 1.0 / years) - 1.0) * 100


def percent_of(value: float, percent: float) -> float:
    """Apply a whole-number percent (15 means 15%) to a value."""
    return value * percent / 100
