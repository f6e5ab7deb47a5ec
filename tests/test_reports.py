from datetime import date

import pytest

from naijatax.core.comparison import calculate_deduction_savings, calculate_year_comparison, percentage_change
from naijatax.core.financial_health import (
    calculate_financial_health,
    expense_management_score,
    generate_health_insights,
    get_health_rating,
)
from naijatax.core.ledger_summary import summarize_ledger, transactions_frame
from naijatax.models.reports import LedgerSummary
from naijatax.tax_engine.classifier import auto_categorize, categorize_transactions


def summary(inflow, outflow):
    return LedgerSummary(
        total_inflow=inflow,
        total_outflow=outflow,
        net_cash_flow=inflow - outflow,
        transaction_count=0,
        business_transaction_count=0,
        output_vat=0,
        input_vat=0,
    )


class TestLedgerSummary:
    def test_totals_and_vat(self, make_txn):
        txns = [
            make_txn(1_075_000, "Invoice 001 settlement", tax_tag="VAT", on=date(2026, 1, 10)),
            make_txn(-215_000, "Printer purchase", tax_tag="VAT", on=date(2026, 2, 3)),
            make_txn(-60_000, "Diesel", on=date(2026, 2, 20)),
            make_txn(-90_000, "School fees", tax_tag="Personal", on=date(2026, 4, 1)),
        ]
        result = summarize_ledger(txns)

        assert result.total_inflow == pytest.approx(1_075_000)
        assert result.total_outflow == pytest.approx(275_000)
        assert result.net_cash_flow == pytest.approx(800_000)
        assert result.output_vat == pytest.approx(75_000)
        assert result.input_vat == pytest.approx(15_000)
        assert result.transaction_count == 4
        assert result.business_transaction_count == 3
        assert result.period_start == date(2026, 1, 10)
        assert result.period_end == date(2026, 4, 1)

    def test_empty_ledger(self):
        result = summarize_ledger([])
        assert result.total_inflow == 0
        assert result.period_start is None

    def test_frame_columns(self, make_txn):
        df = transactions_frame([make_txn(-5_000, excluded_from_tax=True)])
        assert bool(df.loc[0, "business"]) is False
        assert df.loc[0, "category"] == "Uncategorized"


class TestFinancialHealth:
    def test_healthy_business(self, make_txn):
        txns = [
            make_txn(-10_000, "Diesel", "Transport & Travel", source_type="BANK_STATEMENT")
            for _ in range(12)
        ]
        breakdown = calculate_financial_health(summary(1_000_000, 500_000), txns)
        assert breakdown.cashFlowScore == 100
        assert breakdown.profitabilityScore == 100
        assert breakdown.taxComplianceScore == 70
        assert breakdown.expenseManagementScore == 100
        assert breakdown.overall == 93

    def test_no_income(self):
        breakdown = calculate_financial_health(summary(0, 0), [])
        assert breakdown.profitabilityScore == 0
        assert breakdown.expenseManagementScore == 50
        assert breakdown.taxComplianceScore == 100

    @pytest.mark.parametrize("outflow,expected", [
        (400_000, 100),
        (1_000_000, 15),
        (1_200_000, 13),
        (2_500_000, 0),
    ])
    def test_expense_ladder(self, outflow, expected):
        assert expense_management_score(summary(1_000_000, outflow)) == expected

    def test_loss_insights(self, make_txn):
        s = summary(1_000_000, 1_500_000)
        txns = [make_txn(-1_500_000, "Stock")]
        breakdown = calculate_financial_health(s, txns)
        insights = generate_health_insights(breakdown, s, txns)
        by_category = {i.category: i for i in insights}

        assert by_category["Cash Flow"].severity == "critical"
        assert by_category["Profitability"].message == "Operating at a loss (-50.0% margin)"
        assert by_category["Tax Compliance"].severity == "warning"
        assert by_category["Expense Management"].message == "High expense ratio (150.0%)"

    @pytest.mark.parametrize("score,label", [(93, "Excellent"), (60, "Good"), (59, "Fair"), (10, "Poor")])
    def test_rating(self, score, label):
        assert get_health_rating(score).label == label


class TestComparison:
    def test_year_on_year(self):
        result = calculate_year_comparison(120, 100, 500, 0)
        assert result.expenses.change == pytest.approx(20.0)
        assert result.turnover.change == 0

    def test_percentage_change_without_base(self):
        assert percentage_change(10, 0) == 0

    def test_deduction_savings_sole(self):
        result = calculate_deduction_savings(5_000_000, 2_000_000, "SOLE")
        assert result.taxableIncome == 3_000_000
        assert result.taxWithExpenses == pytest.approx(330_000)
        assert result.taxWithoutExpenses == pytest.approx(690_000)
        assert result.savings == pytest.approx(360_000)

    def test_deduction_savings_ltd(self):
        result = calculate_deduction_savings(200_000_000, 150_000_000, "LTD")
        assert result.savings == pytest.approx(45_000_000)

    def test_expenses_above_turnover(self):
        result = calculate_deduction_savings(1_000_000, 3_000_000, "SOLE")
        assert result.taxableIncome == 0


class TestClassifier:
    @pytest.mark.parametrize("description,category", [
        ("UBER TRIP LAGOS", "Transport & Travel"),
        ("EKEDC prepaid token", "Utilities"),
        ("MTN  data bundle", "Telephone & Internet"),
        ("Office rent Q1", "Rent"),
        ("Zzz widget", None),
    ])
    def test_auto_categorize(self, description, category):
        assert auto_categorize(description) == category

    def test_user_category_kept(self, make_txn):
        manual = make_txn(-5_000, "Uber trip", "Client Visits")
        blank = make_txn(-5_000, "Uber trip")
        out = categorize_transactions([manual, blank])
        assert out[0].category_name == "Client Visits"
        assert out[1].category_name == "Transport & Travel"
        assert blank.category_name is None
