from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence

from loguru import logger

from naijatax.models.savings import BusinessProfile, SavingsRecommendation
from naijatax.models.transaction import Transaction
from naijatax.savings.capital_allowance import analyze_capital_allowances
from naijatax.savings.expense_gaps import analyze_missing_expenses
from naijatax.savings.reliefs import analyze_reliefs
from naijatax.savings.remuneration import analyze_salary_dividend
from naijatax.savings.structure import analyze_structure
from naijatax.savings.timing import analyze_timing


def generate_savings_recommendations(
    profile: BusinessProfile,
    transactions: Sequence[Transaction] = (),
    as_of: Optional[date] = None,
) -> List[SavingsRecommendation]:
    """
    Run every savings analyzer and return their recommendations sorted by
    potential saving (largest first; ties keep analyzer order).
    """
    as_of = as_of or date.today()
    items: List[SavingsRecommendation] = []
    items.extend(analyze_capital_allowances(transactions))
    items.extend(analyze_missing_expenses(transactions, as_of=as_of))
    items.extend(analyze_salary_dividend(profile))
    items.extend(analyze_reliefs(profile))
    items.extend(analyze_timing(profile, transactions, as_of=as_of))
    items.extend(analyze_structure(profile))

    items.sort(key=lambda r: r.potentialSaving, reverse=True)
    logger.info("Generated {} savings recommendations for {} profile", len(items), profile.entity_type)
    return items


def total_potential_saving(recommendations: Sequence[SavingsRecommendation]) -> float:
    """Sum of savings, not counting roll-up rows that repeat their members."""
    return sum(r.potentialSaving for r in recommendations if not r.id.endswith("_summary"))
