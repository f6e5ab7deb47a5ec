from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from naijatax.models.savings import BusinessProfile, TaxAtRiskResult
from naijatax.models.transaction import ComplianceDocument, Transaction
from naijatax.savings.recommender import generate_savings_recommendations, total_potential_saving
from naijatax.savings.tax_at_risk import calculate_tax_at_risk

router = APIRouter(prefix="/api/savings", tags=["savings"])


class RecommendationsRequest(BaseModel):
    profile: BusinessProfile
    transactions: List[Transaction] = Field(default_factory=list)
    as_of: Optional[date] = None


class TaxAtRiskRequest(BaseModel):
    transactions: List[Transaction]
    documents: List[ComplianceDocument] = Field(default_factory=list)


@router.post("/recommendations")
async def recommendations(req: RecommendationsRequest) -> Dict[str, Any]:
    recs = generate_savings_recommendations(req.profile, req.transactions, as_of=req.as_of)
    return {
        "recommendations": [r.model_dump() for r in recs],
        "total_potential_saving": total_potential_saving(recs),
    }


@router.post("/tax-at-risk", response_model=TaxAtRiskResult)
async def tax_at_risk(req: TaxAtRiskRequest) -> TaxAtRiskResult:
    return calculate_tax_at_risk(req.transactions, req.documents)
