from __future__ import annotations

from naijatax.models.tax_results import CgtInput, CgtResult, PitInput
from naijatax.tax_engine.bands import non_negative
from naijatax.tax_engine.pit import calculate_pit
from naijatax.tax_engine.statutory import CGT_COMPANY_RATE, CIT_SMALL_TURNOVER


def calculate_cgt(data: CgtInput) -> CgtResult:
    """
    Capital Gains Tax (2025 reform).

    Companies: small (turnover <= 100m) exempt, others 30% flat.
    Individuals: the gain runs through the PIT bands as if it were the only income.
    """
    gain = non_negative(data.gain_amount, "gain_amount")

    if data.entity_type == "company":
        if non_negative(data.turnover, "turnover") <= CIT_SMALL_TURNOVER:
            return CgtResult(gain_amount=gain, tax_payable=0.0, rate_description="0% (Small Company Exempt)")
        return CgtResult(gain_amount=gain, tax_payable=gain * CGT_COMPANY_RATE, rate_description="30% (Flat)")

    pit = calculate_pit(PitInput(gross_income=gain))
    return CgtResult(gain_amount=gain, tax_payable=pit.tax_payable, rate_description="Progressive (Same as PIT)")
