from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional, Sequence

import pandas as pd

from naijatax.core.ledger_summary import transactions_frame
from naijatax.models.savings import SavingsRecommendation
from naijatax.models.transaction import Transaction
from naijatax.tax_engine.statutory import CIT_STANDARD_RATE


# Expenses a trading business normally incurs every month; keyword match on category.
RECURRING_CATEGORIES: Dict[str, tuple] = {
    "Internet": ("internet", "telephone"),
    "Utilities": ("utilit", "electricity"),
    "Rent": ("rent",),
    "Professional Fees": ("professional",),
}
EXPECTED_MONTHS = 10


def _recurring_category(category: str) -> Optional[str]:
    c = category.lower()
    for name, keys in RECURRING_CATEGORIES.items():
        if any(k in c for k in keys):
            return name
    return None


def monthly_coverage(transactions: Sequence[Transaction], year: int) -> pd.DataFrame:
    """
    One row per recurring category seen in `year`:
    recurring, months (distinct months with spend), total (absolute spend)
    """
    df = transactions_frame(transactions)
    df = df[(df["business"] == True) & (df["amount"] < 0) & (df["date"].dt.year == year)].copy()  # noqa: E712
    df["recurring"] = df["category"].map(_recurring_category)
    df = df[df["recurring"].notna()]
    if df.empty:
        return pd.DataFrame(columns=["recurring", "months", "total"])

    df["month"] = df["date"].dt.month
    df["spend"] = df["amount"].abs()
    return (
        df.groupby("recurring")
        .agg(months=("month", "nunique"), total=("spend", "sum"))
        .reset_index()
    )


def analyze_missing_expenses(
    transactions: Sequence[Transaction],
    as_of: Optional[date] = None,
) -> List[SavingsRecommendation]:
    """
    Flag recurring categories recorded in fewer than 10 distinct months of the
    current year. The saving assumes the missing months cost the same as the
    average recorded month; a category never recorded gets no amount.
    """
    as_of = as_of or date.today()
    coverage = {row.recurring: row for row in monthly_coverage(transactions, as_of.year).itertuples(index=False)}

    recs: List[SavingsRecommendation] = []
    for name in RECURRING_CATEGORIES:
        row = coverage.get(name)
        months = int(row.months) if row is not None else 0
        if months >= EXPECTED_MONTHS:
            continue

        missing = EXPECTED_MONTHS - months
        if months:
            avg = float(row.total) / months
            saving = avg * missing * CIT_STANDARD_RATE
            description = (
                f"{name} appears in only {months} month(s) of {as_of.year}. "
                f"About {missing} month(s) of ₦{avg:,.0f} may be unrecorded."
            )
            confidence = "medium"
        else:
            saving = 0.0
            description = f"No {name} expenses recorded in {as_of.year}. Most businesses pay these monthly."
            confidence = "low"

        recs.append(
            SavingsRecommendation(
                id=f"missing_expense_{name.lower().replace(' ', '_')}",
                title=f"Possible missing {name} expenses",
                description=description,
                potentialSaving=saving,
                type="missing_expense",
                confidence=confidence,
                actionLabel="Upload missing receipts",
            )
        )
    return recs
