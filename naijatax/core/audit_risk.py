from __future__ import annotations

from typing import Optional, Sequence

from loguru import logger

from naijatax.core.checklists import RISK_THRESHOLDS, checklist_for
from naijatax.models.risk import AuditInputs, ChecklistCategory, RiskAssessment


DISALLOWED_ITEM_PENALTY = 10

# Red-flag scores per entity type.
LTD_PENALTIES = {
    "receipt_missing": 10,
    "cash_over_500k": 8,
    "no_wht": 10,
    "transport_ratio": 8,
    "marketing_ratio": 8,
    "director_ratio": 10,
    "repeated_losses": 10,
    "sudden_spike": 8,
}

SOLE_PENALTIES = {
    "no_separate_account": 10,
    "receipt_missing": 8,
    "expense_ratio": 10,
    "transport_ratio": 8,
    "phone_ratio": 6,
    "repeated_losses": 8,
    "sudden_spike": 6,
}


def _ratio_above(part: Optional[float], whole: Optional[float], limit: float) -> bool:
    if not part or not whole or whole <= 0:
        return False
    return part / whole > limit


def classify_risk(score: int, entity_code: str) -> str:
    thresholds = RISK_THRESHOLDS.get(entity_code, RISK_THRESHOLDS["SOLE"])
    if score >= thresholds["high"]:
        return "HIGH"
    if score >= thresholds["medium"]:
        return "MEDIUM"
    return "LOW"


def calculate_audit_risk(
    inputs: AuditInputs,
    checklist: Optional[Sequence[ChecklistCategory]] = None,
) -> RiskAssessment:
    """
    Weighted red-flag score for a business profile.

    Category weights count once per category with a selection, disallowed
    items add a flat penalty, then entity-specific and behavioural red flags.
    Output lists are built in checklist order followed by the fixed rule order,
    so identical inputs always give identically ordered output.
    """
    if checklist is None:
        checklist = checklist_for(inputs.type)

    selected = set(inputs.selectedItems)
    score = 0
    warnings = []
    risk_drivers = []
    suggestions = []

    # 1. Checklist selections
    for category in checklist:
        if any(item.id in selected for item in category.items):
            score += category.risk_weight
        for item in category.items:
            if item.id not in selected:
                continue
            if item.is_disallowed:
                warnings.append(f"DISALLOWED: {item.label} ({item.warning})")
                score += DISALLOWED_ITEM_PENALTY
            if item.is_capital_asset:
                warnings.append(
                    f"CAPITAL ASSET: {item.label} should be claimed via Capital Allowance, not expensed."
                )
                suggestions.append(f"Move {item.label} to Capital Assets schedule.")

    # 2. Entity-specific red flags
    if inputs.type == "LTD":
        p = LTD_PENALTIES
        if inputs.receiptMissing:
            score += p["receipt_missing"]
            risk_drivers.append("Missing receipts/invoices")
            suggestions.append("Upload missing receipts.")
        if inputs.cashOver500k:
            score += p["cash_over_500k"]
            risk_drivers.append("Cash payment > ₦500,000")
        if inputs.noWHT:
            score += p["no_wht"]
            risk_drivers.append("No WHT deducted")
            suggestions.append("Deduct WHT and refile.")
        if _ratio_above(inputs.transportTotal, inputs.turnover, 0.20):
            score += p["transport_ratio"]
            risk_drivers.append("Transport > 20% of turnover")
        if _ratio_above(inputs.marketingTotal, inputs.turnover, 0.25):
            score += p["marketing_ratio"]
            risk_drivers.append("Marketing > 25% of turnover")
        if _ratio_above(inputs.directorRemuneration, inputs.profit, 0.15):
            score += p["director_ratio"]
            risk_drivers.append("Director remuneration > 15% of profit")
            suggestions.append("Reclassify director expenses or reduce.")
    else:
        p = SOLE_PENALTIES
        if inputs.noSeparateAccount:
            score += p["no_separate_account"]
            risk_drivers.append("No separate business account")
            suggestions.append("Open a dedicated business bank account.")
        if inputs.receiptMissing:
            score += p["receipt_missing"]
            risk_drivers.append("Missing receipts/invoices")
        if _ratio_above(inputs.totalExpenses, inputs.turnover, 0.70):
            score += p["expense_ratio"]
            risk_drivers.append("Total expenses > 70% of turnover")
        if _ratio_above(inputs.transportTotal, inputs.turnover, 0.25):
            score += p["transport_ratio"]
            risk_drivers.append("Transport > 25% of turnover")
            suggestions.append("Reduce fuel claim to business use only.")
        if _ratio_above(inputs.phoneInternetTotal, inputs.turnover, 0.15):
            score += p["phone_ratio"]
            risk_drivers.append("Phone/Internet > 15% of turnover")
            suggestions.append("Apply percentage apportionment (e.g., 40%).")

    # 3. Behavioural red flags
    if inputs.repeatedLosses:
        score += p["repeated_losses"]
        risk_drivers.append("Repeated business losses")
    if inputs.suddenSpike:
        score += p["sudden_spike"]
        risk_drivers.append("Sudden expense spike (>40%)")

    level = classify_risk(score, inputs.type)
    logger.debug("Audit risk for {} profile: score={} level={}", inputs.type, score, level)

    return RiskAssessment(
        score=score,
        level=level,
        warnings=warnings,
        riskDrivers=risk_drivers,
        suggestions=suggestions,
    )


def calculate_detailed_risk(inputs: AuditInputs, last_year_expenses: float = 0.0) -> RiskAssessment:
    """
    Item-level variant of the scorer: every selected allowable item carries its
    category weight, and expense growth is measured against last year's figure.
    """
    checklist = checklist_for(inputs.type)
    selected = set(inputs.selectedItems)
    score = 0
    warnings = []
    risk_drivers = []
    suggestions = []

    for category in checklist:
        for item in category.items:
            if item.id not in selected:
                continue
            if item.is_disallowed:
                score += DISALLOWED_ITEM_PENALTY
                warnings.append(f"{item.label} is NOT ALLOWED")
                suggestions.append(f"Remove {item.label}")
                risk_drivers.append("Disallowed item selected")
            else:
                score += category.risk_weight

    if inputs.receiptMissing:
        score += 8
        warnings.append("Receipts missing for some expenses")
        risk_drivers.append("No receipt")

    total_expenses = inputs.totalExpenses or 0.0
    if _ratio_above(total_expenses, inputs.turnover, 0.70):
        score += 10
        warnings.append("Expenses >70% of turnover")
        risk_drivers.append("High Expense Ratio")

    if last_year_expenses > 0 and total_expenses > 0:
        change = (total_expenses - last_year_expenses) / last_year_expenses * 100
        if change > 40:
            score += 6
            warnings.append(f"Expenses up {change:.1f}% from last year")
            risk_drivers.append("Spike in expenses")

    return RiskAssessment(
        score=score,
        level=classify_risk(score, inputs.type),
        warnings=warnings,
        riskDrivers=risk_drivers,
        suggestions=suggestions,
    )
