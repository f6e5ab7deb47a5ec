"""
Statutory calculators: PIT, CIT, VAT, WHT, CGT and PAYE, plus the
expense-deduction and year-on-year comparisons.
"""
from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter
from pydantic import BaseModel

from naijatax.core.comparison import calculate_deduction_savings, calculate_year_comparison
from naijatax.models.reports import DeductionSavings, YearComparison
from naijatax.models.risk import EntityCode
from naijatax.models.tax_results import (
    CgtInput,
    CgtResult,
    CitInput,
    CitResult,
    PitInput,
    PitResult,
    VatInput,
    VatResult,
    WhtResult,
)
from naijatax.tax_engine.cgt import calculate_cgt
from naijatax.tax_engine.cit import calculate_cit
from naijatax.tax_engine.paye import calculate_paye
from naijatax.tax_engine.pit import calculate_pit
from naijatax.tax_engine.vat import calculate_vat
from naijatax.tax_engine.wht import calculate_wht

router = APIRouter(prefix="/api/tax", tags=["tax"])


class WhtRequest(BaseModel):
    amount: float
    type: str = "Contract"


class PayeRequest(BaseModel):
    gross_salary: float


@router.post("/pit", response_model=PitResult)
async def pit(req: PitInput) -> PitResult:
    return calculate_pit(req)


@router.post("/cit", response_model=CitResult)
async def cit(req: CitInput) -> CitResult:
    return calculate_cit(req)


@router.post("/vat", response_model=VatResult)
async def vat(req: VatInput) -> VatResult:
    return calculate_vat(req)


@router.post("/wht", response_model=WhtResult)
async def wht(req: WhtRequest) -> WhtResult:
    return calculate_wht(req.amount, req.type)


@router.post("/cgt", response_model=CgtResult)
async def cgt(req: CgtInput) -> CgtResult:
    return calculate_cgt(req)


@router.post("/paye")
async def paye(req: PayeRequest) -> Dict[str, Any]:
    tax = calculate_paye(req.gross_salary)
    return {"gross_salary": req.gross_salary, "tax_payable": tax, "monthly_tax": tax / 12}


class DeductionSavingsRequest(BaseModel):
    turnover: float
    total_expenses: float
    entity_type: EntityCode = "SOLE"


class YearComparisonRequest(BaseModel):
    current_expenses: float
    last_year_expenses: float = 0.0
    current_turnover: float
    last_year_turnover: float = 0.0


@router.post("/deduction-savings", response_model=DeductionSavings)
async def deduction_savings(req: DeductionSavingsRequest) -> DeductionSavings:
    return calculate_deduction_savings(req.turnover, req.total_expenses, req.entity_type)


@router.post("/year-comparison", response_model=YearComparison)
async def year_comparison(req: YearComparisonRequest) -> YearComparison:
    return calculate_year_comparison(
        req.current_expenses,
        req.last_year_expenses,
        req.current_turnover,
        req.last_year_turnover,
    )
