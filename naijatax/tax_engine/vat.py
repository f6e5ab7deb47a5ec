from __future__ import annotations

from naijatax.models.tax_results import VatInput, VatResult
from naijatax.tax_engine.bands import non_negative
from naijatax.tax_engine.statutory import VAT_RATE


def vat_from_inclusive_amount(amount_including_vat: float) -> float:
    """VAT portion of a VAT-inclusive amount: amount - amount / 1.075."""
    return amount_including_vat - (amount_including_vat / (1 + VAT_RATE))


def vat_on_base_amount(base_amount: float) -> float:
    return base_amount * VAT_RATE


def calculate_vat(data: VatInput) -> VatResult:
    if not data.is_registered:
        return VatResult(
            vat_payable=0.0,
            credit_carried_forward=0.0,
            status="Not Registered - VAT Awareness Only. No Credit for Input VAT.",
        )

    output_vat = non_negative(data.output_vat, "output_vat")
    input_vat = non_negative(data.input_vat, "input_vat")
    payable = max(0.0, output_vat - input_vat)

    return VatResult(
        vat_payable=payable,
        credit_carried_forward=max(0.0, input_vat - output_vat),
        status="Payable" if payable > 0 else "Credit Carried Forward",
    )
