from __future__ import annotations

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel


class LedgerSummary(BaseModel):
    total_inflow: float
    total_outflow: float
    net_cash_flow: float
    transaction_count: int
    business_transaction_count: int
    output_vat: float
    input_vat: float
    period_start: Optional[date] = None
    period_end: Optional[date] = None


class HealthScoreBreakdown(BaseModel):
    overall: int
    cashFlowScore: int
    profitabilityScore: int
    taxComplianceScore: int
    expenseManagementScore: int


class HealthInsight(BaseModel):
    category: str
    message: str
    severity: Literal["positive", "warning", "critical"]
    recommendation: Optional[str] = None


class HealthRating(BaseModel):
    label: str
    color: str
    description: str


class PeriodChange(BaseModel):
    thisYear: float
    lastYear: float
    change: float


class YearComparison(BaseModel):
    expenses: PeriodChange
    turnover: PeriodChange


class DeductionSavings(BaseModel):
    taxWithExpenses: float
    taxWithoutExpenses: float
    savings: float
    totalExpenses: float
    taxableIncome: float
