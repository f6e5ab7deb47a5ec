from __future__ import annotations

from naijatax.models.tax_results import CitInput, CitResult
from naijatax.tax_engine.bands import non_negative
from naijatax.tax_engine.statutory import CIT_CATEGORIES, CIT_MEDIUM_TURNOVER, CIT_SMALL_TURNOVER


def classify_company(turnover: float) -> str:
    if turnover <= CIT_SMALL_TURNOVER:
        return "Small"
    if turnover <= CIT_MEDIUM_TURNOVER:
        return "Medium"
    return "Large"


def calculate_cit(data: CitInput) -> CitResult:
    """
    Company Income Tax + Development Levy on assessable profit.

    Small (turnover <= 100m): 0% tax, 0% levy
    Medium (<= 50bn) and Large: 30% tax, 4% levy
    The 15% minimum effective tax rate for large groups is not modelled.
    """
    turnover = non_negative(data.turnover, "turnover")
    profit = non_negative(data.assessable_profit, "assessable_profit")

    category = classify_company(turnover)
    rates = CIT_CATEGORIES[category]

    return CitResult(
        category=category,
        assessable_profit=profit,
        tax_rate=rates["tax_rate"],
        levy_rate=rates["levy_rate"],
        tax_payable=profit * rates["tax_rate"],
        development_levy=profit * rates["levy_rate"],
        minimum_etr_applied=False,
    )
