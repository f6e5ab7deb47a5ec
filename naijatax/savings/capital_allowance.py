from __future__ import annotations

import re
from typing import List, Optional, Sequence

from loguru import logger
from pydantic import BaseModel

from naijatax.core.ledger_summary import is_business_transaction
from naijatax.models.savings import SavingsRecommendation
from naijatax.models.transaction import Transaction
from naijatax.tax_engine.statutory import (
    CAPITAL_ALLOWANCE_CLASSES,
    CAPITAL_ASSET_MIN_COST,
    CIT_STANDARD_RATE,
    INVESTMENT_ALLOWANCE_RATE,
)


class DetectedAsset(BaseModel):
    transaction_id: str
    description: str
    asset_class: str
    label: str
    cost: float
    annual_rate: float
    annual_allowance: float
    investment_allowance: float
    year_one_allowance: float
    tax_saving: float


_PATTERNS = {
    key: re.compile(r"\b(" + "|".join(re.escape(k) for k in asset_cls["keywords"]) + r")\b", re.IGNORECASE)
    for key, asset_cls in CAPITAL_ALLOWANCE_CLASSES.items()
}


def classify_asset(description: str) -> Optional[str]:
    for key, pattern in _PATTERNS.items():
        if pattern.search(description or ""):
            return key
    return None


def year_one_allowance(cost: float, asset_class: str) -> tuple[float, float, float]:
    """(annual allowance, investment allowance, year-one claim)."""
    asset_cls = CAPITAL_ALLOWANCE_CLASSES[asset_class]
    annual = cost * asset_cls["rate"]
    investment = cost * INVESTMENT_ALLOWANCE_RATE if asset_cls["investment_allowance"] else 0.0
    return annual, investment, annual + investment


def detect_capital_assets(transactions: Sequence[Transaction]) -> List[DetectedAsset]:
    assets: List[DetectedAsset] = []
    for txn in transactions:
        if not txn.is_expense or not is_business_transaction(txn) or txn.abs_amount <= CAPITAL_ASSET_MIN_COST:
            continue
        asset_class = classify_asset(txn.description)
        if asset_class is None:
            continue
        cost = txn.abs_amount
        annual, investment, claim = year_one_allowance(cost, asset_class)
        asset_cls = CAPITAL_ALLOWANCE_CLASSES[asset_class]
        assets.append(
            DetectedAsset(
                transaction_id=txn.id,
                description=txn.description,
                asset_class=asset_class,
                label=asset_cls["label"],
                cost=cost,
                annual_rate=asset_cls["rate"],
                annual_allowance=annual,
                investment_allowance=investment,
                year_one_allowance=claim,
                tax_saving=claim * CIT_STANDARD_RATE,
            )
        )
    logger.debug("Detected {} capital asset purchases", len(assets))
    return assets


def analyze_capital_allowances(transactions: Sequence[Transaction]) -> List[SavingsRecommendation]:
    assets = detect_capital_assets(transactions)
    recs: List[SavingsRecommendation] = []

    for asset in assets:
        extra = (
            f" plus a {int(INVESTMENT_ALLOWANCE_RATE * 100)}% investment allowance"
            if asset.investment_allowance > 0 else ""
        )
        recs.append(
            SavingsRecommendation(
                id=f"capital_allowance_{asset.transaction_id}",
                title=f"Claim capital allowance on {asset.label}",
                description=(
                    f"'{asset.description}' (₦{asset.cost:,.0f}) looks like a capital asset. "
                    f"Claim {int(asset.annual_rate * 100)}% annual allowance{extra} "
                    f"for a Year-1 deduction of ₦{asset.year_one_allowance:,.0f}."
                ),
                potentialSaving=asset.tax_saving,
                type="capital_allowance",
                confidence="high",
                actionLabel="Move to Capital Assets schedule",
            )
        )

    if len(assets) > 1:
        total_claim = sum(a.year_one_allowance for a in assets)
        recs.append(
            SavingsRecommendation(
                id="capital_allowance_summary",
                title=f"{len(assets)} capital assets found in your expenses",
                description=(
                    f"Capitalising these purchases gives ₦{total_claim:,.0f} of Year-1 capital allowances "
                    "instead of a disallowed expense."
                ),
                potentialSaving=sum(a.tax_saving for a in assets),
                type="capital_allowance",
                confidence="high",
                actionLabel="Review asset register",
            )
        )
    return recs
