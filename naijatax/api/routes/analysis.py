from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from loguru import logger
from pydantic import BaseModel, Field

from naijatax.agents.compliance_agent import ComplianceAgent
from naijatax.models.savings import BusinessProfile
from naijatax.models.transaction import ComplianceDocument, Transaction

router = APIRouter(prefix="/api", tags=["analysis"])


class AnalysisRequest(BaseModel):
    profile: BusinessProfile
    transactions: List[Transaction]
    documents: List[ComplianceDocument] = Field(default_factory=list)
    as_of: Optional[date] = None


@router.post("/analysis")
async def analysis(req: AnalysisRequest) -> Dict[str, Any]:
    agent = ComplianceAgent()
    try:
        return agent.analyze(req.transactions, req.documents, req.profile, as_of=req.as_of)
    except Exception as e:
        logger.exception("Compliance analysis failed")
        raise HTTPException(status_code=500, detail=f"Analysis failed: {e}")
