"""
Audit endpoints: checklist risk score, rule engine (single + batch) and rule catalogue.
"""
from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter
from pydantic import BaseModel, Field

from naijatax.core.audit_risk import calculate_audit_risk, calculate_detailed_risk
from naijatax.core.compliance_engine import audit_transactions, build_audit_log_entries, run_audit
from naijatax.core.compliance_rules import rule_catalogue
from naijatax.models.audit import RuleInfo
from naijatax.models.risk import AuditInputs, RiskAssessment
from naijatax.models.transaction import ComplianceDocument, Transaction

router = APIRouter(prefix="/api/audit", tags=["audit"])


class DetailedRiskRequest(BaseModel):
    inputs: AuditInputs
    last_year_expenses: float = 0.0


class AuditRunRequest(BaseModel):
    transaction: Transaction
    documents: List[ComplianceDocument] = Field(default_factory=list)


class AuditBatchRequest(BaseModel):
    transactions: List[Transaction]
    documents: List[ComplianceDocument] = Field(default_factory=list)


@router.post("/risk", response_model=RiskAssessment)
async def audit_risk(inputs: AuditInputs) -> RiskAssessment:
    return calculate_audit_risk(inputs)


@router.post("/risk/detailed", response_model=RiskAssessment)
async def audit_risk_detailed(req: DetailedRiskRequest) -> RiskAssessment:
    return calculate_detailed_risk(req.inputs, req.last_year_expenses)


@router.post("/run")
async def audit_run(req: AuditRunRequest) -> Dict[str, Any]:
    txn = req.transaction
    docs = [d for d in req.documents if d.transaction_id == txn.id]
    run = run_audit(txn, docs)
    return {
        "transaction_id": txn.id,
        "results": [r.model_dump(mode="json") for r in run.results],
        "updates": run.updates.model_dump(),
        "audit_log": [e.model_dump() for e in build_audit_log_entries(txn.id, txn.company_id, run.results)],
    }


@router.post("/batch")
async def audit_batch(req: AuditBatchRequest) -> Dict[str, Any]:
    audited, runs = audit_transactions(req.transactions, req.documents)
    return {
        "transactions": [t.model_dump(mode="json") for t in audited],
        "runs": [r.model_dump(mode="json") for r in runs],
        "total_findings": sum(len(r.results) for r in runs),
    }


@router.get("/rules", response_model=List[RuleInfo])
async def list_rules() -> List[RuleInfo]:
    return rule_catalogue()
