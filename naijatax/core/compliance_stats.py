from __future__ import annotations

import math
from typing import Sequence

from naijatax.core.compliance_rules import RECEIPT_THRESHOLD
from naijatax.models.audit import AuditFinding
from naijatax.models.compliance import ComplianceStats
from naijatax.models.transaction import ComplianceDocument, Transaction


DOC_WEIGHT = 0.4
ALLOWABILITY_WEIGHT = 0.4
VAT_WEIGHT = 0.1
WHT_WEIGHT = 0.1

COMPLIANT_AT = 85
REVIEW_AT = 70


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _pct(numerator: float, denominator: float) -> int:
    if denominator <= 0:
        return 100
    return round_half_up(numerator / denominator * 100)


def compliance_status(overall: int) -> str:
    if overall >= COMPLIANT_AT:
        return "compliant"
    if overall >= REVIEW_AT:
        return "review_needed"
    return "non_compliant"


def calculate_compliance_stats(
    transactions: Sequence[Transaction],
    documents: Sequence[ComplianceDocument],
    issues: Sequence[AuditFinding],
) -> ComplianceStats:
    """
    Roll up audit state into four sub-scores (0-100) and an overall score.
    Documentation is measured over expenses; allowability over every line.
    A sub-score with nothing to measure is 100.
    """
    expenses = [t for t in transactions if t.is_expense]

    verified = {d.transaction_id for d in documents if d.status == "verified"}
    needing_docs = [t for t in expenses if t.abs_amount > RECEIPT_THRESHOLD]
    doc_score = _pct(sum(1 for t in needing_docs if t.id in verified), len(needing_docs))

    total = sum(t.abs_amount for t in transactions)
    allowable = sum(t.abs_amount if t.allowable_amount is None else t.allowable_amount for t in transactions)
    allow_score = _pct(allowable, total)

    vat_candidates = [t for t in transactions if "vat" in (t.description or "").lower()]
    vat_score = _pct(
        sum(1 for t in vat_candidates if t.is_tagged or t.audit_status == "pass"),
        len(vat_candidates),
    )

    wht_candidates = [
        t for t in transactions
        if "professional" in (t.category_name or "").lower() or "contract" in (t.category_name or "").lower()
    ]
    wht_score = _pct(sum(1 for t in wht_candidates if t.audit_status != "fail"), len(wht_candidates))

    overall = round_half_up(
        doc_score * DOC_WEIGHT
        + allow_score * ALLOWABILITY_WEIGHT
        + vat_score * VAT_WEIGHT
        + wht_score * WHT_WEIGHT
    )

    return ComplianceStats(
        docScore=doc_score,
        allowabilityScore=allow_score,
        vatScore=vat_score,
        whtScore=wht_score,
        overallScore=overall,
        status=compliance_status(overall),
        totalIssues=len(issues),
    )
