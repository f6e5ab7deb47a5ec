from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter
from pydantic import BaseModel, Field

from naijatax.core.compliance_stats import calculate_compliance_stats
from naijatax.core.document_requirements import get_required_documents, validate_compliance
from naijatax.models.audit import AuditFinding
from naijatax.models.compliance import ComplianceIssue, ComplianceStats, DocumentRequest, ExtractedDocumentData
from naijatax.models.transaction import ComplianceDocument, Transaction

router = APIRouter(prefix="/api/compliance", tags=["compliance"])


class StatsRequest(BaseModel):
    transactions: List[Transaction]
    documents: List[ComplianceDocument] = Field(default_factory=list)
    issues: List[AuditFinding] = Field(default_factory=list)


class ValidateRequest(BaseModel):
    transaction: Transaction
    document: ExtractedDocumentData


@router.post("/stats", response_model=ComplianceStats)
async def compliance_stats(req: StatsRequest) -> ComplianceStats:
    return calculate_compliance_stats(req.transactions, req.documents, req.issues)


@router.post("/required-documents", response_model=List[DocumentRequest])
async def required_documents(txn: Transaction) -> List[DocumentRequest]:
    return get_required_documents(txn)


@router.post("/validate-document")
async def validate_document(req: ValidateRequest) -> Dict[str, Any]:
    issues: List[ComplianceIssue] = validate_compliance(req.transaction, req.document)
    return {"valid": not issues, "issues": [i.model_dump() for i in issues]}
