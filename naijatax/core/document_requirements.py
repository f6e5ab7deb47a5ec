"""
Supporting documents expected per expense category, and receipt-vs-ledger checks.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import List, Tuple

from naijatax.core.compliance_rules import AMOUNT_TOLERANCE, DATE_TOLERANCE_DAYS, MIN_NARRATION_LENGTH, RECEIPT_THRESHOLD
from naijatax.models.compliance import ComplianceIssue, DocumentRequest, ExtractedDocumentData
from naijatax.models.transaction import Transaction


# category -> ((document type, reason, legal reference), ...)
REQUIRED_DOCS_MAP = MappingProxyType({
    "Travel & Transport": (
        ("Receipt", "Proof of travel expense", "CITA S24"),
    ),
    "Motor Vehicle Expenses": (
        ("Fuel Receipt", "Fuel purchase evidence", "CITA S24"),
        ("Logbook", "Business use justification", "PITA S20"),
    ),
    "Rent & Rates": (
        ("Tenancy Agreement", "Proof of tenancy", "CITA S24"),
        ("Payment Receipt", "Proof of payment", "CITA S24"),
    ),
    "Legal & Professional Fees": (
        ("Invoice", "Service invoice", "CITA S24"),
        ("WHT Receipt", "Evidence of WHT remittance", "CITA S80"),
    ),
    "Utilities": (
        ("Utility Bill", "Proof of usage", "CITA S24"),
    ),
    "Repairs & Maintenance": (
        ("Invoice/Receipt", "Proof of work done", "CITA S24"),
    ),
    "Equipment": (
        ("Purchase Invoice", "Capital Allowance claim", "CITA Second Schedule"),
    ),
    "Entertainment": (
        ("Receipt", "Expense verification", "CITA S24"),
    ),
})


def _request(txn: Transaction, requirement: Tuple[str, str, str]) -> DocumentRequest:
    doc_type, reason, rule = requirement
    return DocumentRequest(transactionId=txn.id, requiredDocType=doc_type, reason=reason, ruleRef=rule)


def get_required_documents(txn: Transaction) -> List[DocumentRequest]:
    """Documents an auditor would ask for; income needs none."""
    if txn.amount > 0:
        return []

    requests = [_request(txn, r) for r in REQUIRED_DOCS_MAP.get(txn.category, ())]

    if txn.abs_amount > RECEIPT_THRESHOLD and len(txn.description or "") < MIN_NARRATION_LENGTH:
        requests.append(_request(
            txn, ("Detailed Receipt/Narration", "High value cash transaction needs detail", "Audit Requirement"),
        ))
    if txn.tax_tag == "VAT":
        requests.append(_request(txn, ("VAT Invoice", "Input VAT claim evidence", "VATA S13")))
    return requests


def validate_compliance(txn: Transaction, doc: ExtractedDocumentData) -> List[ComplianceIssue]:
    issues: List[ComplianceIssue] = []

    if doc.extractedDate is not None:
        diff_days = abs((doc.extractedDate - txn.date).days)
        if diff_days > DATE_TOLERANCE_DAYS:
            issues.append(ComplianceIssue(
                code="DATE_MISMATCH",
                message=(
                    f"Receipt date ({doc.extractedDate.isoformat()}) does not match "
                    f"transaction date ({txn.date.isoformat()})"
                ),
                severity="warning",
            ))

    if doc.extractedAmount is not None and txn.abs_amount > 0:
        ledger = txn.abs_amount
        receipt = abs(doc.extractedAmount)
        percent_diff = abs(ledger - receipt) / ledger * 100
        if percent_diff > AMOUNT_TOLERANCE * 100:
            issues.append(ComplianceIssue(
                code="AMOUNT_MISMATCH",
                message=f"Receipt amount ({receipt:,.2f}) differs from transaction ({ledger:,.2f}) by {percent_diff:.1f}%",
                severity="critical",
            ))

    return issues
