from __future__ import annotations

from typing import List, Sequence, Tuple

from loguru import logger


def non_negative(value: float, field: str = "value") -> float:
    """Clamp a monetary input to zero; negative money has no meaning for the calculators."""
    v = float(value or 0.0)
    if v < 0:
        logger.debug("Clamping negative {}={} to 0", field, v)
        return 0.0
    return v


def apply_bands(amount: float, bands: Sequence[Tuple[float, float]]) -> Tuple[float, List[dict]]:
    """
    Walk (width, rate) bands in order, each taxing only the slice that falls inside it.
    Returns (total_tax, [{band, rate, tax}, ...]) with one row per band actually consumed.
    """
    remaining = max(0.0, amount)
    total = 0.0
    rows: List[dict] = []

    for width, rate in bands:
        if remaining <= 0:
            break
        consumed = min(remaining, width)
        tax = consumed * rate
        total += tax
        rows.append({"band": consumed, "rate": rate, "tax": tax})
        remaining -= consumed

    return total, rows
