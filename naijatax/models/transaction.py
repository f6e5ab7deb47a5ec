from __future__ import annotations

from datetime import date as Date
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


TaxTag = Literal["None", "VAT", "WHT", "Non-deductible", "Owner Loan", "Personal", "Capital Gain"]
AuditStatus = Literal["pass", "review", "fail"]
AllowabilityStatus = Literal["allowable", "partial", "non_allowable", "pending"]
DocumentStatus = Literal["missing", "pending", "verified", "rejected", "review"]
SourceType = Literal["BANK_STATEMENT", "RECEIPT", "INVOICE", "MANUAL", "OTHER"]


class Transaction(BaseModel):
    """One bank-statement line. Amount is signed: inflow > 0, outflow < 0."""

    id: str
    date: Date
    description: str = ""
    amount: float
    company_id: Optional[str] = None

    category_name: Optional[str] = None
    sub_category: Optional[str] = None
    tax_tag: TaxTag = "None"
    excluded_from_tax: bool = False
    is_business: bool = True
    source_type: Optional[SourceType] = None
    notes: Optional[str] = None

    audit_status: Optional[AuditStatus] = None
    allowability_status: Optional[AllowabilityStatus] = None
    allowable_amount: Optional[float] = None
    audit_notes: Optional[str] = None

    preview_url: Optional[str] = None
    document_ids: List[str] = Field(default_factory=list)

    @property
    def category(self) -> str:
        return self.category_name or "Uncategorized"

    @property
    def abs_amount(self) -> float:
        return abs(self.amount)

    @property
    def is_expense(self) -> bool:
        return self.amount < 0

    @property
    def is_tagged(self) -> bool:
        return self.tax_tag != "None"

    @property
    def has_evidence(self) -> bool:
        return bool(self.preview_url) or bool(self.document_ids)


class OcrData(BaseModel):
    date: Optional[Date] = None
    amount: Optional[float] = None
    text: Optional[str] = None


class ComplianceDocument(BaseModel):
    id: str
    transaction_id: str
    document_type: str = "Receipt"
    status: DocumentStatus = "pending"
    ocr_data: Optional[OcrData] = None


class TransactionUpdate(BaseModel):
    """Partial update produced by an audit run; persistence merges it into the stored row."""

    audit_status: AuditStatus = "pass"
    allowability_status: AllowabilityStatus = "allowable"
    allowable_amount: float = Field(default=0.0, ge=0)
    audit_notes: Optional[str] = None
