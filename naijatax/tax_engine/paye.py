from __future__ import annotations

from naijatax.tax_engine.bands import apply_bands, non_negative
from naijatax.tax_engine.statutory import (
    PAYE_BANDS,
    PAYE_CRA_FLOOR,
    PAYE_CRA_FLOOR_RATE,
    PAYE_CRA_VARIABLE_RATE,
)


def consolidated_relief(gross: float) -> float:
    return max(PAYE_CRA_FLOOR, gross * PAYE_CRA_FLOOR_RATE) + gross * PAYE_CRA_VARIABLE_RATE


def calculate_paye(gross_salary: float) -> float:
    """
    PAYE on an annual salary under the CRA regime:
      CRA = max(200k, 1% of gross) + 20% of gross
      300k @ 7%, 300k @ 11%, 500k @ 15%, 500k @ 19%, 1.6m @ 21%, remainder @ 24%
    """
    gross = non_negative(gross_salary, "gross_salary")
    if gross == 0:
        return 0.0
    taxable = max(0.0, gross - consolidated_relief(gross))
    tax, _ = apply_bands(taxable, PAYE_BANDS)
    return tax
