from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


EntityType = Literal["sole_trader", "ltd", "partnership"]
Confidence = Literal["high", "medium", "low"]
RecommendationType = Literal[
    "capital_allowance",
    "missing_expense",
    "salary_dividend",
    "relief",
    "incentive",
    "timing",
    "structure",
    "warning",
]
IssueCategory = Literal["Documentation", "Allowability", "VAT", "WHT"]
EvidenceStatus = Literal["complete", "partial", "missing"]
SeverityLevel = Literal["low", "medium", "high", "critical"]


class BusinessProfile(BaseModel):
    entity_type: EntityType = "ltd"
    turnover: float = 0.0
    profit: float = 0.0
    total_assets: float = 0.0
    sector: str = ""
    ventures: int = 1
    owner_needs: float = 0.0  # cash the owner draws from the business each year
    is_registered_for_vat: bool = False
    export_revenue: float = 0.0

    @property
    def entity_code(self) -> str:
        return "LTD" if self.entity_type == "ltd" else "SOLE"


class SavingsRecommendation(BaseModel):
    id: str
    title: str
    description: str
    potentialSaving: float
    type: RecommendationType
    confidence: Confidence
    actionLabel: str


class RemunerationPlan(BaseModel):
    salary: float
    dividend: float
    personal_tax: float
    company_tax: float
    total_tax: float
    all_salary_tax: float
    all_dividend_tax: float

    @property
    def savings_vs_all_salary(self) -> float:
        return self.all_salary_tax - self.total_tax

    @property
    def savings_vs_all_dividend(self) -> float:
        return self.all_dividend_tax - self.total_tax


class TaxAtRiskBreakdown(BaseModel):
    category: IssueCategory
    disallowedAmount: float
    taxAtRisk: float
    taxRate: float
    affectedTransactions: List[str] = Field(default_factory=list)
    documentCount: int
    evidenceStatus: EvidenceStatus
    confidenceLevel: Confidence
    actionableInsight: str


class ProgressMetrics(BaseModel):
    totalIssues: int
    resolvedIssues: int
    percentageResolved: float


class TaxAtRiskResult(BaseModel):
    totalAtRisk: float
    breakdown: List[TaxAtRiskBreakdown] = Field(default_factory=list)
    currentTaxLiability: float
    potentialTaxLiability: float
    progressMetrics: ProgressMetrics
    severityLevel: SeverityLevel
    estimatedPenalties: float
    note: Optional[str] = None
