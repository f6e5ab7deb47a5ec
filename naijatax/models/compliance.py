from __future__ import annotations

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel


ComplianceStatus = Literal["compliant", "review_needed", "non_compliant"]


class ComplianceStats(BaseModel):
    docScore: int
    allowabilityScore: int
    vatScore: int
    whtScore: int
    overallScore: int
    status: ComplianceStatus
    totalIssues: int


class DocumentRequest(BaseModel):
    transactionId: str
    requiredDocType: str
    reason: str
    ruleRef: str
    status: Literal["missing", "pending", "verified", "rejected"] = "missing"


class ExtractedDocumentData(BaseModel):
    extractedDate: Optional[date] = None
    extractedAmount: Optional[float] = None
    extractedVendor: Optional[str] = None


class ComplianceIssue(BaseModel):
    code: str
    message: str
    severity: Literal["warning", "critical"]
