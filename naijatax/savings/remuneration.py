from __future__ import annotations

from typing import List, Optional

from loguru import logger

from naijatax.models.savings import BusinessProfile, RemunerationPlan, SavingsRecommendation
from naijatax.tax_engine.bands import non_negative
from naijatax.tax_engine.paye import calculate_paye
from naijatax.tax_engine.statutory import CIT_STANDARD_RATE, DIVIDEND_WHT_RATE


SALARY_STEP = 500_000.0
MIN_WORTHWHILE_SAVING = 10_000.0


def remuneration_tax(salary: float, dividend: float, profit: float) -> tuple[float, float]:
    """(personal tax, company tax) for paying `salary` + `dividend` out of `profit`."""
    personal = calculate_paye(salary) + dividend * DIVIDEND_WHT_RATE
    company = max(0.0, profit - salary) * CIT_STANDARD_RATE
    return personal, company


def _salary_grid(owner_needs: float) -> List[float]:
    grid = []
    salary = 0.0
    while salary < owner_needs:
        grid.append(salary)
        salary += SALARY_STEP
    grid.append(owner_needs)
    return grid


def optimize_remuneration(profit: float, owner_needs: float) -> Optional[RemunerationPlan]:
    """
    Search salary/dividend splits of what the owner draws each year, in ₦500k
    salary steps, and return the split with the lowest combined tax.
    """
    profit = non_negative(profit, "profit")
    owner_needs = non_negative(owner_needs, "owner_needs")
    if owner_needs <= 0:
        return None

    def total(salary: float) -> float:
        return sum(remuneration_tax(salary, owner_needs - salary, profit))

    best_salary = min(_salary_grid(owner_needs), key=total)
    personal, company = remuneration_tax(best_salary, owner_needs - best_salary, profit)

    return RemunerationPlan(
        salary=best_salary,
        dividend=owner_needs - best_salary,
        personal_tax=personal,
        company_tax=company,
        total_tax=personal + company,
        all_salary_tax=total(owner_needs),
        all_dividend_tax=total(0.0),
    )


def analyze_salary_dividend(profile: BusinessProfile) -> List[SavingsRecommendation]:
    if profile.entity_type != "ltd":
        return []
    plan = optimize_remuneration(profile.profit, profile.owner_needs)
    if plan is None:
        return []

    saving = max(plan.savings_vs_all_salary, plan.savings_vs_all_dividend)
    logger.debug("Best remuneration split salary={} dividend={} saving={}", plan.salary, plan.dividend, saving)
    if saving <= MIN_WORTHWHILE_SAVING:
        return []

    return [
        SavingsRecommendation(
            id="salary_dividend_split",
            title="Optimise director salary vs dividend",
            description=(
                f"Pay ₦{plan.salary:,.0f} as salary and ₦{plan.dividend:,.0f} as dividend. "
                f"Combined tax ₦{plan.total_tax:,.0f} vs ₦{plan.all_salary_tax:,.0f} all-salary "
                f"and ₦{plan.all_dividend_tax:,.0f} all-dividend."
            ),
            potentialSaving=saving,
            type="salary_dividend",
            confidence="medium",
            actionLabel="Update payroll plan",
        )
    ]
