"""Rounding helpers for amounts shown in insight text"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest whole unit, halves towards +infinity (2.5 -> 3, -2.5 -> -2)"""
    return math.floor(value + 0.5)
