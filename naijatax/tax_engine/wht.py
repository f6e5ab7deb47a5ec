from __future__ import annotations

from loguru import logger

from naijatax.models.tax_results import WhtResult
from naijatax.tax_engine.bands import non_negative
from naijatax.tax_engine.statutory import WHT_RATES


def wht_rate(wht_type: str) -> float:
    rate = WHT_RATES.get(wht_type)
    if rate is None:
        logger.debug("Unknown WHT type {!r}; applying 0%", wht_type)
        return 0.0
    return rate


def calculate_wht(amount: float, wht_type: str) -> WhtResult:
    amount = non_negative(amount, "amount")
    rate = wht_rate(wht_type)
    return WhtResult(amount=amount, rate=rate, tax_payable=amount * rate, type=wht_type)
