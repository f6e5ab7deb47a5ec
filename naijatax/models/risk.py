from __future__ import annotations

from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


EntityCode = Literal["SOLE", "LTD"]
RiskLevel = Literal["LOW", "MEDIUM", "HIGH"]


class ChecklistItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    description: Optional[str] = None
    is_disallowed: bool = False
    warning: Optional[str] = None
    is_capital_asset: bool = False


class ChecklistCategory(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    risk_weight: int
    items: Tuple[ChecklistItem, ...]


class AuditInputs(BaseModel):
    type: EntityCode = "SOLE"
    turnover: float = 0.0
    totalExpenses: Optional[float] = None
    profit: Optional[float] = None
    selectedItems: List[str] = Field(default_factory=list)

    receiptMissing: bool = False
    cashOver500k: bool = False
    noWHT: bool = False
    noSeparateAccount: bool = False
    repeatedLosses: bool = False
    suddenSpike: bool = False

    transportTotal: Optional[float] = None
    marketingTotal: Optional[float] = None
    directorRemuneration: Optional[float] = None
    phoneInternetTotal: Optional[float] = None
    isReviewed: bool = False


class RiskAssessment(BaseModel):
    score: int
    level: RiskLevel
    warnings: List[str] = Field(default_factory=list)
    riskDrivers: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
