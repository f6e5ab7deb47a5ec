"""
Tax at risk: the extra tax a business would owe if every open compliance issue
were assessed against it.

Issue categories and the rate applied to the disallowed amount:
  Documentation  audit fail/review or allowability pending      30% (CIT)
  Allowability   non_allowable or partial                        30% (CIT)
  VAT            VAT-tagged and failed or without evidence       7.5%
  WHT            WHT-tagged and failed or without evidence       10%
"""
from __future__ import annotations

from typing import Dict, List, Sequence, Set

from loguru import logger

from naijatax.models.savings import ProgressMetrics, TaxAtRiskBreakdown, TaxAtRiskResult
from naijatax.models.transaction import ComplianceDocument, Transaction
from naijatax.tax_engine.statutory import CIT_STANDARD_RATE, TAX_DISCLAIMER, VAT_RATE


WHT_RISK_RATE = 0.10
PENALTY_RATE = 0.10

SEVERITY_THRESHOLDS = ((100_000.0, "low"), (500_000.0, "medium"), (1_000_000.0, "high"))

CONFIDENCE_BY_EVIDENCE = {"missing": "high", "partial": "medium", "complete": "low"}

_INSIGHTS = {
    "Documentation": "Upload receipts or invoices for {n} transaction(s) to clear ₦{amt:,.0f} of exposure.",
    "Allowability": "Review {n} disallowed or partly allowed expense(s); reclassify personal or capital items.",
    "VAT": "Attach VAT invoices to {n} VAT-tagged transaction(s) to support input VAT claims.",
    "WHT": "Obtain WHT credit notes for {n} transaction(s) and confirm remittance to FIRS.",
}


def _round(value: float) -> float:
    return round(value, 2)


def severity_for(total_at_risk: float) -> str:
    for limit, level in SEVERITY_THRESHOLDS:
        if total_at_risk < limit:
            return level
    return "critical"


def evidence_status(with_evidence: int, affected: int) -> str:
    if affected and with_evidence == affected:
        return "complete"
    if with_evidence > 0:
        return "partial"
    return "missing"


def _documentation_issue(t: Transaction, has_evidence: bool) -> bool:
    return t.audit_status in ("fail", "review") or t.allowability_status == "pending"


def _allowability_issue(t: Transaction, has_evidence: bool) -> bool:
    return t.allowability_status in ("non_allowable", "partial")


def _vat_issue(t: Transaction, has_evidence: bool) -> bool:
    return t.tax_tag == "VAT" and (t.audit_status == "fail" or not has_evidence)


def _wht_issue(t: Transaction, has_evidence: bool) -> bool:
    return t.tax_tag == "WHT" and (t.audit_status == "fail" or not has_evidence)


def _disallowed_amount(t: Transaction) -> float:
    if t.allowability_status == "non_allowable" or t.allowable_amount is None:
        return t.abs_amount
    return max(0.0, t.abs_amount - t.allowable_amount)


_CATEGORIES: Dict[str, tuple] = {
    # name -> (predicate, disallowed amount, rate)
    "Documentation": (_documentation_issue, lambda t: t.abs_amount, CIT_STANDARD_RATE),
    "Allowability": (_allowability_issue, _disallowed_amount, CIT_STANDARD_RATE),
    "VAT": (_vat_issue, lambda t: t.abs_amount, VAT_RATE),
    "WHT": (_wht_issue, lambda t: t.abs_amount, WHT_RISK_RATE),
}


def _evidence_lookup(documents: Sequence[ComplianceDocument]) -> Set[str]:
    return {d.transaction_id for d in documents if d.status not in ("missing", "rejected")}


def calculate_tax_at_risk(
    transactions: Sequence[Transaction],
    documents: Sequence[ComplianceDocument] = (),
) -> TaxAtRiskResult:
    business = [t for t in transactions if t.tax_tag != "Personal"]
    documented = _evidence_lookup(documents)

    def has_evidence(t: Transaction) -> bool:
        return t.has_evidence or t.id in documented

    breakdown: List[TaxAtRiskBreakdown] = []
    issue_ids: Set[str] = set()
    at_risk_by_category: Dict[str, float] = {}

    for category, (predicate, amount_of, rate) in _CATEGORIES.items():
        affected = [t for t in business if predicate(t, has_evidence(t))]
        if not affected:
            continue
        issue_ids.update(t.id for t in affected)

        disallowed = sum(amount_of(t) for t in affected)
        tax_at_risk = max(0.0, disallowed * rate)
        at_risk_by_category[category] = tax_at_risk
        with_evidence = sum(1 for t in affected if has_evidence(t))
        status = evidence_status(with_evidence, len(affected))

        breakdown.append(TaxAtRiskBreakdown(
            category=category,
            disallowedAmount=_round(disallowed),
            taxAtRisk=_round(tax_at_risk),
            taxRate=rate,
            affectedTransactions=[t.id for t in affected],
            documentCount=with_evidence,
            evidenceStatus=status,
            confidenceLevel=CONFIDENCE_BY_EVIDENCE[status],
            actionableInsight=_INSIGHTS[category].format(n=len(affected), amt=disallowed),
        ))

    total_at_risk = sum(at_risk_by_category.values())
    income = sum(t.amount for t in business if t.amount > 0)
    expenses = sum(t.abs_amount for t in business if t.amount < 0)
    current = max(0.0, (income - expenses) * CIT_STANDARD_RATE)

    resolved = sum(1 for t in business if t.audit_status == "pass")
    total_issues = len(issue_ids)
    denominator = resolved + total_issues
    pct = resolved / denominator * 100 if denominator else 100.0

    logger.debug("Tax at risk {} across {} issue transactions", total_at_risk, total_issues)

    return TaxAtRiskResult(
        totalAtRisk=_round(total_at_risk),
        breakdown=breakdown,
        currentTaxLiability=_round(current),
        potentialTaxLiability=_round(current + total_at_risk),
        progressMetrics=ProgressMetrics(
            totalIssues=total_issues,
            resolvedIssues=resolved,
            percentageResolved=_round(pct),
        ),
        severityLevel=severity_for(total_at_risk),
        estimatedPenalties=_round(at_risk_by_category.get("WHT", 0.0) * PENALTY_RATE),
        note=TAX_DISCLAIMER,
    )
