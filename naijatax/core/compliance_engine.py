from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from loguru import logger

from naijatax.core.compliance_rules import AUDIT_RULES, AuditRule
from naijatax.models.audit import AuditAction, AuditFinding, AuditLogEntry, AuditRun, RuleFailed
from naijatax.models.transaction import ComplianceDocument, Transaction, TransactionUpdate


_STATUS_RANK = {"pass": 0, "review": 1, "fail": 2}


def _escalate(current: str, target: str) -> str:
    return target if _STATUS_RANK[target] > _STATUS_RANK[current] else current


def _apply_action(updates: TransactionUpdate, action: AuditAction, amount: float, impact: float) -> None:
    if action is AuditAction.DISALLOW:
        updates.allowability_status = "non_allowable"
        updates.allowable_amount = 0.0
        updates.audit_status = "fail"
    elif action is AuditAction.LIMIT_50PCT:
        if updates.allowability_status != "non_allowable":
            updates.allowability_status = "partial"
        updates.allowable_amount = min(updates.allowable_amount, max(0.0, amount - impact))
        updates.audit_status = _escalate(updates.audit_status, "review")
    else:
        # flag, reclassify_asset
        updates.audit_status = _escalate(updates.audit_status, "review")


def run_audit(
    txn: Transaction,
    documents: Sequence[ComplianceDocument] = (),
    rules: Sequence[AuditRule] = AUDIT_RULES,
) -> AuditRun:
    """
    Evaluate every rule against one transaction and derive its audit state.

    `documents` are the evidence records linked to this transaction. Inflows
    are not expenses and always pass. Status only moves pass -> review -> fail
    within a run, and a disallowance is never relaxed by a later partial limit.
    """
    amount = txn.abs_amount
    updates = TransactionUpdate(allowable_amount=amount)
    results: List[AuditFinding] = []

    if not txn.is_expense:
        return AuditRun(transaction_id=txn.id, results=results, updates=updates)

    for rule in rules:
        outcome = rule.check(txn, documents)
        if not isinstance(outcome, RuleFailed):
            continue
        logger.debug("Rule {} failed for txn {}: {}", rule.code, txn.id, outcome.finding)
        results.append(
            AuditFinding(
                ruleCode=rule.code,
                ruleName=rule.name,
                severity=rule.severity,
                finding=outcome.finding,
                impactAmount=outcome.impact,
                fixAction=outcome.action,
            )
        )
        _apply_action(updates, outcome.action, amount, outcome.impact)

    if results:
        if any(r.severity == "critical" for r in results):
            updates.audit_status = "fail"
        else:
            updates.audit_status = _escalate(updates.audit_status, "review")
        updates.audit_notes = "; ".join(r.finding for r in results)

    return AuditRun(transaction_id=txn.id, results=results, updates=updates)


def apply_updates(txn: Transaction, updates: TransactionUpdate) -> Transaction:
    """Return a copy of the transaction with the audit fields merged in."""
    return txn.model_copy(update=updates.model_dump())


def group_documents(documents: Iterable[ComplianceDocument]) -> Dict[str, List[ComplianceDocument]]:
    by_txn: Dict[str, List[ComplianceDocument]] = defaultdict(list)
    for doc in documents:
        by_txn[doc.transaction_id].append(doc)
    return by_txn


def audit_transactions(
    transactions: Sequence[Transaction],
    documents: Sequence[ComplianceDocument] = (),
    rules: Sequence[AuditRule] = AUDIT_RULES,
) -> Tuple[List[Transaction], List[AuditRun]]:
    """Audit a whole ledger; returns the updated transactions and one run per transaction."""
    by_txn = group_documents(documents)
    audited: List[Transaction] = []
    runs: List[AuditRun] = []
    for txn in transactions:
        run = run_audit(txn, by_txn.get(txn.id, []), rules)
        runs.append(run)
        audited.append(apply_updates(txn, run.updates))

    failed = sum(1 for r in runs if r.updates.audit_status == "fail")
    findings = sum(len(r.results) for r in runs)
    logger.info("Audited {} transactions: {} findings, {} failed", len(runs), findings, failed)
    return audited, runs


def build_audit_log_entries(
    transaction_id: str,
    company_id: Optional[str],
    results: Sequence[AuditFinding],
) -> List[AuditLogEntry]:
    return [
        AuditLogEntry(
            transaction_id=transaction_id,
            company_id=company_id,
            rule_code=r.ruleCode,
            rule_name=r.ruleName,
            severity=r.severity,
            finding=r.finding,
            impact_amount=r.impactAmount,
            fix_action=r.fixAction.value,
        )
        for r in results
    ]
