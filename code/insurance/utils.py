import math


def round_half_up(value: float) -> int:
    # Matches Math.round: halves go toward +infinity, so -2.5 -> -2.
    return math.floor(value + 0.5)


def ceil_to_multiple(value: float, step: float) -> int:
    return math.ceil(value / step) * step


def safe_div(a, b, default=None):
    try:
        return a / b
    except ZeroDivisionError:
        return default
