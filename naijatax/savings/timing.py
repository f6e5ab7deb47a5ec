from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence

from naijatax.models.savings import BusinessProfile, SavingsRecommendation
from naijatax.models.transaction import Transaction
from naijatax.savings.capital_allowance import detect_capital_assets
from naijatax.tax_engine.statutory import CIT_STANDARD_RATE, SMALL_BUSINESS_THRESHOLD


YEAR_END_FROM_MONTH = 10
PREPAY_PROFIT_FLOOR = 5_000_000.0
PREPAY_SHARE = 0.10
DEFER_BAND = 0.10


def analyze_timing(
    profile: BusinessProfile,
    transactions: Sequence[Transaction] = (),
    as_of: Optional[date] = None,
) -> List[SavingsRecommendation]:
    """Year-end moves; only offered from October onwards."""
    as_of = as_of or date.today()
    if as_of.month < YEAR_END_FROM_MONTH:
        return []

    recs: List[SavingsRecommendation] = []
    months_left = 12 - as_of.month + 1

    if profile.profit > PREPAY_PROFIT_FLOOR:
        recs.append(SavingsRecommendation(
            id="timing_prepay_expenses",
            title="Prepay allowable expenses before year-end",
            description=(
                f"With ₦{profile.profit:,.0f} profit and {months_left} month(s) left, bringing forward about "
                f"{PREPAY_SHARE:.0%} of profit in rent, maintenance or supplies reduces this year's tax."
            ),
            potentialSaving=profile.profit * PREPAY_SHARE * CIT_STANDARD_RATE,
            type="timing",
            confidence="medium",
            actionLabel="Plan year-end spend",
        ))

    if abs(profile.turnover - SMALL_BUSINESS_THRESHOLD) <= SMALL_BUSINESS_THRESHOLD * DEFER_BAND:
        recs.append(SavingsRecommendation(
            id="timing_defer_income",
            title="Defer income to stay under the small business threshold",
            description=(
                f"Turnover of ₦{profile.turnover:,.0f} is within 10% of the ₦25m threshold. "
                "Invoicing late-December work in January may keep the 0% CIT rate."
            ),
            potentialSaving=max(0.0, profile.profit) * CIT_STANDARD_RATE,
            type="timing",
            confidence="medium",
            actionLabel="Review invoicing schedule",
        ))

    h2_assets = detect_capital_assets(
        [t for t in transactions if t.date.year == as_of.year and t.date.month >= 7]
    )
    if h2_assets:
        claim = sum(a.year_one_allowance for a in h2_assets)
        recs.append(SavingsRecommendation(
            id="timing_accelerate_capital_allowance",
            title="Lock in Year-1 allowances on H2 asset purchases",
            description=(
                f"{len(h2_assets)} asset purchase(s) since July qualify for ₦{claim:,.0f} of Year-1 "
                "capital allowances. Make sure they are in use before year-end."
            ),
            potentialSaving=claim * CIT_STANDARD_RATE,
            type="timing",
            confidence="high",
            actionLabel="Update asset register",
        ))

    return recs
