from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field


WhtType = Literal[
    "Dividend",
    "Interest",
    "Royalty",
    "Rent",
    "Contract",
    "Professional",
    "Consultancy",
    "Commission",
    "DirectorFee",
    "SalesOfGoods",
]

CitCategory = Literal["Small", "Medium", "Large"]


class PitInput(BaseModel):
    gross_income: float = 0.0
    allowable_deductions: float = 0.0  # business expenses
    non_taxable_income: float = 0.0  # pension / NHF / NHIS contributions
    actual_rent_paid: float = 0.0


class PitBand(BaseModel):
    band: float  # portion of taxable income consumed by this band
    rate: float
    tax: float


class PitResult(BaseModel):
    gross_income: float
    taxable_income: float
    reliefs: float
    cra: float
    rent_relief: float
    tax_payable: float
    effective_rate: float
    is_exempt: bool
    breakdown: List[PitBand] = Field(default_factory=list)


class CitInput(BaseModel):
    turnover: float = 0.0
    assessable_profit: float = 0.0


class CitResult(BaseModel):
    category: CitCategory
    assessable_profit: float
    tax_rate: float
    levy_rate: float
    tax_payable: float
    development_levy: float
    minimum_etr_applied: bool = False


class VatInput(BaseModel):
    output_vat: float = 0.0  # collected on sales
    input_vat: float = 0.0  # paid on purchases
    is_registered: bool = True


class VatResult(BaseModel):
    vat_payable: float
    credit_carried_forward: float = 0.0
    status: str


class WhtResult(BaseModel):
    amount: float
    rate: float
    tax_payable: float
    type: str


class CgtInput(BaseModel):
    entity_type: Literal["individual", "company"]
    gain_amount: float = 0.0
    turnover: float = 0.0


class CgtResult(BaseModel):
    gain_amount: float
    tax_payable: float
    rate_description: str
