from __future__ import annotations

from naijatax.models.reports import DeductionSavings, PeriodChange, YearComparison
from naijatax.models.tax_results import CitInput, PitInput
from naijatax.tax_engine.bands import non_negative
from naijatax.tax_engine.cit import calculate_cit
from naijatax.tax_engine.pit import calculate_pit


def percentage_change(current: float, previous: float) -> float:
    if previous <= 0:
        return 0.0
    return (current - previous) / previous * 100


def calculate_year_comparison(
    current_expenses: float,
    last_year_expenses: float,
    current_turnover: float,
    last_year_turnover: float,
) -> YearComparison:
    return YearComparison(
        expenses=PeriodChange(
            thisYear=current_expenses,
            lastYear=last_year_expenses,
            change=percentage_change(current_expenses, last_year_expenses),
        ),
        turnover=PeriodChange(
            thisYear=current_turnover,
            lastYear=last_year_turnover,
            change=percentage_change(current_turnover, last_year_turnover),
        ),
    )


def _income_tax(income: float, turnover: float, entity_code: str) -> float:
    if entity_code == "LTD":
        return calculate_cit(CitInput(turnover=turnover, assessable_profit=income)).tax_payable
    return calculate_pit(PitInput(gross_income=income)).tax_payable


def calculate_deduction_savings(turnover: float, total_expenses: float, entity_code: str) -> DeductionSavings:
    """
    Tax with vs. without claiming business expenses.

    SOLE is taxed through the PIT bands, LTD through CIT with the company
    category taken from turnover.
    """
    turnover = non_negative(turnover, "turnover")
    total_expenses = non_negative(total_expenses, "total_expenses")
    taxable_income = max(turnover - total_expenses, 0.0)

    tax_with = _income_tax(taxable_income, turnover, entity_code)
    tax_without = _income_tax(turnover, turnover, entity_code)

    return DeductionSavings(
        taxWithExpenses=tax_with,
        taxWithoutExpenses=tax_without,
        savings=tax_without - tax_with,
        totalExpenses=total_expenses,
        taxableIncome=taxable_income,
    )
