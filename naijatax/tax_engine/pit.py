from __future__ import annotations

from naijatax.models.tax_results import PitBand, PitInput, PitResult
from naijatax.tax_engine.bands import apply_bands, non_negative
from naijatax.tax_engine.statutory import (
    PIT_BANDS,
    PIT_EXEMPT_THRESHOLD,
    RENT_RELIEF_CAP,
    RENT_RELIEF_RATE,
)


def calculate_rent_relief(actual_rent_paid: float) -> float:
    """20% of rent actually paid, capped at ₦500,000."""
    return min(RENT_RELIEF_CAP, non_negative(actual_rent_paid, "actual_rent_paid") * RENT_RELIEF_RATE)


def calculate_pit(data: PitInput) -> PitResult:
    """
    Personal Income Tax, Nigeria Tax Act 2025:
      gross <= 800k: exempt
      CRA: abolished (reported as 0)
      rent relief: min(500k, 20% of rent paid)
      bands on taxable income:
        first 800k @ 0%, next 2.2m @ 15%, next 9m @ 18%,
        next 13m @ 21%, next 25m @ 23%, remainder @ 25%
    """
    gross_income = non_negative(data.gross_income, "gross_income")
    deductions = non_negative(data.allowable_deductions, "allowable_deductions")
    non_taxable = non_negative(data.non_taxable_income, "non_taxable_income")

    if gross_income <= PIT_EXEMPT_THRESHOLD:
        return PitResult(
            gross_income=gross_income,
            taxable_income=0.0,
            reliefs=0.0,
            cra=0.0,
            rent_relief=0.0,
            tax_payable=0.0,
            effective_rate=0.0,
            is_exempt=True,
            breakdown=[],
        )

    cra = 0.0
    rent_relief = calculate_rent_relief(data.actual_rent_paid)
    reliefs = cra + rent_relief + non_taxable

    taxable_income = max(0.0, gross_income - deductions - reliefs)
    tax_payable, rows = apply_bands(taxable_income, PIT_BANDS)

    return PitResult(
        gross_income=gross_income,
        taxable_income=taxable_income,
        reliefs=reliefs,
        cra=cra,
        rent_relief=rent_relief,
        tax_payable=tax_payable,
        effective_rate=tax_payable / gross_income if gross_income > 0 else 0.0,
        is_exempt=False,
        breakdown=[PitBand(**r) for r in rows],
    )
