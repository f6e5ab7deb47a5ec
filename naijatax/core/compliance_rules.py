from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from naijatax.config import settings
from naijatax.models.audit import AuditAction, RuleFailed, RuleInfo, RuleOutcome, RulePassed, Severity
from naijatax.models.transaction import ComplianceDocument, Transaction


RuleCheck = Callable[[Transaction, Sequence[ComplianceDocument]], RuleOutcome]

RECEIPT_THRESHOLD = 10_000.0
MIN_NARRATION_LENGTH = 5
DATE_TOLERANCE_DAYS = 7
AMOUNT_TOLERANCE = 0.05
CAPITAL_ITEM_THRESHOLD = 100_000.0
ENTERTAINMENT_TURNOVER_SHARE = 0.005
VAT_CANDIDATE_MIN = 1_000.0
WHT_PROFESSIONAL_MIN = 3_000.0
WHT_PROFESSIONAL_RATE = 0.10

EVIDENCE_STATUSES = frozenset({"verified", "pending", "review"})

PERSONAL_KEYWORDS = ("personal", "family", "school fees", "groceries", "gym")
CAPITAL_KEYWORDS = ("generator", "macbook", "laptop", "machinery", "building", "furniture", "renovation")
FINE_KEYWORDS = ("fine", "penalty", "traffic offense", "lastma", "frsc")

PASSED = RulePassed()


@dataclass(frozen=True)
class AuditRule:
    code: str
    name: str
    description: str
    severity: Severity
    legal_ref: str
    check: RuleCheck

    def info(self) -> RuleInfo:
        return RuleInfo(
            code=self.code,
            name=self.name,
            description=self.description,
            severity=self.severity,
            legalRef=self.legal_ref,
        )


def _text(txn: Transaction) -> str:
    return (txn.description or "").lower()


def _category(txn: Transaction) -> str:
    return (txn.category_name or "").lower()


def _num(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(round(value, 2))


def _has_any(haystack: str, keywords: Sequence[str]) -> bool:
    return any(k in haystack for k in keywords)


# --- Documentation ---

def _missing_receipt(txn: Transaction, docs: Sequence[ComplianceDocument]) -> RuleOutcome:
    has_doc = any(d.status in EVIDENCE_STATUSES for d in docs)
    if txn.abs_amount > RECEIPT_THRESHOLD and not has_doc:
        return RuleFailed(
            finding="Missing supporting document for transaction > N10k",
            impact=txn.abs_amount,
            action=AuditAction.DISALLOW,
        )
    return PASSED


def _vague_narration(txn: Transaction, docs: Sequence[ComplianceDocument]) -> RuleOutcome:
    if txn.abs_amount > RECEIPT_THRESHOLD and len(txn.description or "") < MIN_NARRATION_LENGTH:
        return RuleFailed(finding="Vague narration for high value cash expense", action=AuditAction.FLAG)
    return PASSED


def _date_mismatch(txn: Transaction, docs: Sequence[ComplianceDocument]) -> RuleOutcome:
    doc = next((d for d in docs if d.ocr_data and d.ocr_data.date), None)
    if doc is None:
        return PASSED
    diff_days = abs((txn.date - doc.ocr_data.date).days)
    if diff_days > DATE_TOLERANCE_DAYS:
        return RuleFailed(finding=f"Receipt date deviates by {math.ceil(diff_days)} days", action=AuditAction.FLAG)
    return PASSED


def _amount_mismatch(txn: Transaction, docs: Sequence[ComplianceDocument]) -> RuleOutcome:
    doc = next((d for d in docs if d.ocr_data and d.ocr_data.amount), None)
    if doc is None or txn.abs_amount == 0:
        return PASSED
    ledger = txn.abs_amount
    receipt = abs(doc.ocr_data.amount)
    diff = abs(ledger - receipt)
    if diff / ledger > AMOUNT_TOLERANCE:
        return RuleFailed(
            finding=f"Amount mismatch: Ledger {_num(ledger)} vs Doc {_num(receipt)}",
            impact=diff,
            action=AuditAction.FLAG,
        )
    return PASSED


# --- Allowability ---

def _personal_expense(txn: Transaction, docs: Sequence[ComplianceDocument]) -> RuleOutcome:
    if _has_any(_text(txn), PERSONAL_KEYWORDS):
        return RuleFailed(
            finding="Potential personal expense detected",
            impact=txn.abs_amount,
            action=AuditAction.DISALLOW,
        )
    return PASSED


def _capital_expensed(txn: Transaction, docs: Sequence[ComplianceDocument]) -> RuleOutcome:
    if (
        txn.abs_amount > CAPITAL_ITEM_THRESHOLD
        and _has_any(_text(txn), CAPITAL_KEYWORDS)
        and "asset" not in _category(txn)
    ):
        return RuleFailed(
            finding="Large asset purchase expensed instead of capitalized",
            impact=txn.abs_amount,
            action=AuditAction.RECLASSIFY_ASSET,
        )
    return PASSED


def _excessive_entertainment(reference_turnover: float) -> RuleCheck:
    threshold = reference_turnover * ENTERTAINMENT_TURNOVER_SHARE

    def check(txn: Transaction, docs: Sequence[ComplianceDocument]) -> RuleOutcome:
        if "entertainment" in _category(txn) and txn.abs_amount > threshold:
            return RuleFailed(
                finding=f"Entertainment expense exceeds 0.5% of turnover ({_num(threshold)})",
                impact=txn.abs_amount - threshold,
                action=AuditAction.LIMIT_50PCT,
            )
        return PASSED

    return check


def _donation(txn: Transaction, docs: Sequence[ComplianceDocument]) -> RuleOutcome:
    if "donation" in _category(txn) or "donation" in _text(txn):
        return RuleFailed(
            finding="Donation may not be to approved body",
            impact=txn.abs_amount,
            action=AuditAction.FLAG,
        )
    return PASSED


def _fines_penalties(txn: Transaction, docs: Sequence[ComplianceDocument]) -> RuleOutcome:
    if _has_any(_text(txn), FINE_KEYWORDS):
        return RuleFailed(
            finding="Fines and penalties are strictly disallowed",
            impact=txn.abs_amount,
            action=AuditAction.DISALLOW,
        )
    return PASSED


# --- VAT ---

def _unclaimed_vat(txn: Transaction, docs: Sequence[ComplianceDocument]) -> RuleOutcome:
    if not txn.is_tagged and txn.abs_amount > VAT_CANDIDATE_MIN and "vat" in _text(txn):
        return RuleFailed(finding="Likely VAT expense missing tax tag", action=AuditAction.FLAG)
    return PASSED


def _professional_untagged(txn: Transaction, docs: Sequence[ComplianceDocument]) -> RuleOutcome:
    if "professional" in _category(txn) and not txn.is_tagged:
        return RuleFailed(finding="Professional fees usually require VAT tag", action=AuditAction.FLAG)
    return PASSED


# --- WHT ---

def _professional_wht(txn: Transaction, docs: Sequence[ComplianceDocument]) -> RuleOutcome:
    if "professional" in _category(txn) and txn.abs_amount >= WHT_PROFESSIONAL_MIN and txn.tax_tag != "WHT":
        return RuleFailed(
            finding="Ensure 10% WHT was deducted on Professional Fees",
            impact=txn.abs_amount * WHT_PROFESSIONAL_RATE,
            action=AuditAction.FLAG,
        )
    return PASSED


def build_audit_rules(reference_turnover: float) -> Tuple[AuditRule, ...]:
    """
    Ordered rule table. Entertainment is measured against `reference_turnover`
    (the company's turnover when known, otherwise the configured reference).
    """
    return (
        AuditRule("DOC_001", "Missing Receipt", "No receipt found for expense > N10,000.",
                  "critical", "CITA S24", _missing_receipt),
        AuditRule("DOC_002", "Cash Transaction Gap", "Cash expense > N10,000 without detailed narration.",
                  "warning", "Audit Policy", _vague_narration),
        AuditRule("DOC_003", "Date Mismatch", "Receipt date matches ledger date within 7 days.",
                  "warning", "Internal Control", _date_mismatch),
        AuditRule("DOC_004", "Amount Mismatch", "Receipt amount matches ledger amount within 5%.",
                  "critical", "Internal Control", _amount_mismatch),
        AuditRule("ALLOW_001", "Personal Expense", "Personal expenses are not allowable.",
                  "critical", "PITA S20", _personal_expense),
        AuditRule("ALLOW_002", "Capital Expenditure Reclassification",
                  "Items > N100k like machinery should be capitalized.",
                  "warning", "CITA Second Sched", _capital_expensed),
        AuditRule("ALLOW_003", "Excessive Entertainment", "Entertainment > 0.5% of turnover.",
                  "warning", "CITA S24", _excessive_entertainment(reference_turnover)),
        AuditRule("ALLOW_004", "Donations", "Unapproved donations are not allowable.",
                  "warning", "CITA S25", _donation),
        AuditRule("ALLOW_005", "Fines & Penalties", "Fines and penalties are disallowed.",
                  "critical", "CITA S27", _fines_penalties),
        AuditRule("VAT_001", "Unclaimed VAT", "VATable expenses without proper Tax Tag.",
                  "info", "VATA S13", _unclaimed_vat),
        AuditRule("VAT_003", "No Tax Tag", "Expense seems to be VAT inclusive but not tagged.",
                  "info", "VATA", _professional_untagged),
        AuditRule("WHT_001", "Professional Fees WHT", "Professional fees must suffer WHT.",
                  "warning", "CITA S80", _professional_wht),
    )


AUDIT_RULES: Tuple[AuditRule, ...] = build_audit_rules(settings.ENTERTAINMENT_REFERENCE_TURNOVER)


def rule_catalogue(rules: Sequence[AuditRule] = AUDIT_RULES) -> List[RuleInfo]:
    return [r.info() for r in rules]
