from __future__ import annotations

import math


def clamp(value: float, lower: float = 0.0, upper: float = 100.0) -> float:
    return min(max(value, lower), upper)


def round_half_up(value: float) -> int:
    # Halves round toward +inf, unlike round() which rounds half to even.
    return int(math.floor(value + 0.5))


def percent_of(part: float, whole: float) -> float | None:
    """part / whole * 100, or None when the ratio is not computable."""
    if whole is None or whole <= 0:
        return None
    result = float(part) / float(whole) * 100.0
    if math.isnan(result) or math.isinf(result):
        return None
    return result


__all__ = ["clamp", "round_half_up", "percent_of"]
