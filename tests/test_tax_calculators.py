"""
Statutory calculators (Nigeria Tax Act 2025).

PIT bands: 800k @ 0%, 2.2m @ 15%, 9m @ 18%, 13m @ 21%, 25m @ 23%, rest @ 25%
CIT: turnover <= 100m Small (0%), otherwise 30% + 4% development levy
VAT 7.5%; WHT by payment type
"""
import pytest

from naijatax.models.tax_results import CgtInput, CitInput, PitInput, VatInput
from naijatax.tax_engine.cgt import calculate_cgt
from naijatax.tax_engine.cit import calculate_cit, classify_company
from naijatax.tax_engine.paye import calculate_paye
from naijatax.tax_engine.pit import calculate_pit, calculate_rent_relief
from naijatax.tax_engine.vat import calculate_vat, vat_from_inclusive_amount, vat_on_base_amount
from naijatax.tax_engine.wht import calculate_wht, wht_rate


class TestPIT:
    def test_worked_example(self):
        result = calculate_pit(PitInput(
            gross_income=5_000_000,
            allowable_deductions=500_000,
            non_taxable_income=0,
            actual_rent_paid=1_000_000,
        ))
        assert result.rent_relief == pytest.approx(200_000)
        assert result.cra == 0
        assert result.taxable_income == pytest.approx(4_300_000)
        assert result.tax_payable == pytest.approx(564_000)
        assert [b.tax for b in result.breakdown] == pytest.approx([0, 330_000, 234_000])
        assert result.effective_rate == pytest.approx(564_000 / 5_000_000)
        assert result.is_exempt is False

    def test_exempt_at_threshold(self):
        result = calculate_pit(PitInput(gross_income=800_000))
        assert result.is_exempt is True
        assert result.tax_payable == 0
        assert result.breakdown == []

    def test_tax_non_decreasing_above_threshold(self):
        incomes = [800_001, 1_000_000, 3_000_000, 12_000_000, 25_000_000, 50_000_000, 120_000_000]
        taxes = [calculate_pit(PitInput(gross_income=i)).tax_payable for i in incomes]
        assert taxes == sorted(taxes)

    def test_top_band(self):
        # 0 + 330k + 1.62m + 2.73m + 5.75m + 10m @ 25%
        result = calculate_pit(PitInput(gross_income=60_000_000))
        assert result.tax_payable == pytest.approx(330_000 + 1_620_000 + 2_730_000 + 5_750_000 + 2_500_000)

    def test_rent_relief_capped(self):
        assert calculate_rent_relief(5_000_000) == 500_000
        assert calculate_rent_relief(1_000_000) == pytest.approx(200_000)

    def test_negative_income_clamped(self):
        result = calculate_pit(PitInput(gross_income=-1_000))
        assert result.is_exempt is True
        assert result.gross_income == 0

    def test_deductions_cannot_make_taxable_negative(self):
        result = calculate_pit(PitInput(gross_income=1_000_000, allowable_deductions=5_000_000))
        assert result.taxable_income == 0
        assert result.tax_payable == 0


class TestCIT:
    def test_small_company_boundary(self):
        result = calculate_cit(CitInput(turnover=100_000_000, assessable_profit=20_000_000))
        assert result.category == "Small"
        assert result.tax_rate == 0
        assert result.tax_payable == 0
        assert result.development_levy == 0

    def test_medium_company_just_above_boundary(self):
        result = calculate_cit(CitInput(turnover=100_000_001, assessable_profit=10_000_000))
        assert result.category == "Medium"
        assert result.tax_rate == 0.30
        assert result.tax_payable == pytest.approx(3_000_000)
        assert result.development_levy == pytest.approx(400_000)

    def test_large_company_minimum_etr_not_applied(self):
        result = calculate_cit(CitInput(turnover=60_000_000_000, assessable_profit=1_000_000_000))
        assert result.category == "Large"
        assert result.minimum_etr_applied is False

    def test_classify(self):
        assert classify_company(50_000_000_000) == "Medium"
        assert classify_company(0) == "Small"


class TestVAT:
    def test_payable(self):
        result = calculate_vat(VatInput(output_vat=75_000, input_vat=25_000, is_registered=True))
        assert result.vat_payable == 50_000
        assert result.status == "Payable"

    def test_credit_carried_forward(self):
        result = calculate_vat(VatInput(output_vat=10_000, input_vat=30_000))
        assert result.vat_payable == 0
        assert result.credit_carried_forward == 20_000
        assert result.status == "Credit Carried Forward"

    def test_unregistered_pays_nothing(self):
        result = calculate_vat(VatInput(output_vat=1_000_000, input_vat=0, is_registered=False))
        assert result.vat_payable == 0
        assert result.status.startswith("Not Registered")

    def test_conversions(self):
        assert vat_from_inclusive_amount(107_500) == pytest.approx(7_500)
        assert vat_on_base_amount(100_000) == pytest.approx(7_500)


class TestWHT:
    def test_contract(self):
        result = calculate_wht(100_000, "Contract")
        assert result.rate == 0.05
        assert result.tax_payable == pytest.approx(5_000)

    @pytest.mark.parametrize("wht_type,rate", [
        ("Dividend", 0.10),
        ("Rent", 0.10),
        ("DirectorFee", 0.10),
        ("Professional", 0.05),
        ("SalesOfGoods", 0.02),
    ])
    def test_rates(self, wht_type, rate):
        assert wht_rate(wht_type) == rate

    def test_unknown_type_is_zero(self):
        result = calculate_wht(100_000, "Lottery")
        assert result.rate == 0
        assert result.tax_payable == 0


class TestCGT:
    def test_small_company_exempt(self):
        result = calculate_cgt(CgtInput(entity_type="company", gain_amount=1_000_000, turnover=50_000_000))
        assert result.tax_payable == 0
        assert result.rate_description == "0% (Small Company Exempt)"

    def test_company_flat_rate(self):
        result = calculate_cgt(CgtInput(entity_type="company", gain_amount=1_000_000, turnover=200_000_000))
        assert result.tax_payable == pytest.approx(300_000)

    def test_individual_uses_pit_bands(self):
        result = calculate_cgt(CgtInput(entity_type="individual", gain_amount=5_000_000))
        assert result.tax_payable == pytest.approx(690_000)
        assert result.rate_description == "Progressive (Same as PIT)"


class TestPAYE:
    def test_zero_salary(self):
        assert calculate_paye(0) == 0

    def test_low_salary(self):
        # CRA = 200k + 200k; taxable 600k -> 21k + 33k
        assert calculate_paye(1_000_000) == pytest.approx(54_000)

    def test_reaches_top_band(self):
        # CRA = 200k + 1m; taxable 3.8m
        assert calculate_paye(5_000_000) == pytest.approx(704_000)
