from __future__ import annotations

from typing import List

from naijatax.models.savings import BusinessProfile, SavingsRecommendation
from naijatax.models.tax_results import PitInput
from naijatax.savings.reliefs import qualifies_for_small_business_exemption
from naijatax.tax_engine.paye import calculate_paye
from naijatax.tax_engine.pit import calculate_pit
from naijatax.tax_engine.statutory import CIT_STANDARD_RATE, DIVIDEND_WHT_RATE, SMALL_BUSINESS_THRESHOLD


INCORPORATED_SALARY = 5_000_000.0
HOLDING_TURNOVER_FLOOR = 50_000_000.0
HOLDING_SAVING_RATE = 0.10


def incorporated_tax(profit: float, turnover: float) -> float:
    """CIT on profit after a director salary, PAYE on the salary, WHT on the rest paid as dividend."""
    salary = min(INCORPORATED_SALARY, profit)
    company_profit = profit - salary
    cit = 0.0 if turnover <= SMALL_BUSINESS_THRESHOLD else company_profit * CIT_STANDARD_RATE
    dividend = company_profit - cit
    return cit + calculate_paye(salary) + dividend * DIVIDEND_WHT_RATE


def analyze_structure(profile: BusinessProfile) -> List[SavingsRecommendation]:
    recs: List[SavingsRecommendation] = []
    profit = max(0.0, profile.profit)

    if profile.entity_type == "sole_trader" and profit > 0:
        as_sole = calculate_pit(PitInput(gross_income=profit)).tax_payable
        as_ltd = incorporated_tax(profit, profile.turnover)
        if as_sole > as_ltd:
            recs.append(SavingsRecommendation(
                id="structure_incorporate",
                title="Incorporate as a limited company",
                description=(
                    f"As a sole trader you pay about ₦{as_sole:,.0f} PIT. As a company paying you a salary "
                    f"and dividends the combined tax is about ₦{as_ltd:,.0f}."
                ),
                potentialSaving=as_sole - as_ltd,
                type="structure",
                confidence="medium",
                actionLabel="Talk to an accountant about incorporation",
            ))

    if profile.entity_type == "ltd" and qualifies_for_small_business_exemption(profile) and profit > 0:
        recs.append(SavingsRecommendation(
            id="structure_ltd_small_company",
            title="Keep the company within small-company limits",
            description="Your company qualifies for 0% CIT while turnover and assets stay within ₦25m.",
            potentialSaving=profit * CIT_STANDARD_RATE,
            type="structure",
            confidence="medium",
            actionLabel="Monitor turnover and assets",
        ))

    if profile.turnover > HOLDING_TURNOVER_FLOOR and profile.ventures > 1:
        recs.append(SavingsRecommendation(
            id="structure_holding_company",
            title="Consider a holding company structure",
            description=(
                f"With {profile.ventures} ventures, separate subsidiaries under a holding company can ring-fence "
                "risk and let smaller units use small-company reliefs."
            ),
            potentialSaving=profit * HOLDING_SAVING_RATE,
            type="structure",
            confidence="low",
            actionLabel="Get structuring advice",
        ))

    if profile.entity_type == "partnership":
        recs.append(SavingsRecommendation(
            id="structure_partnership_to_ltd",
            title="Convert partnership to a limited company",
            description="Partners are taxed personally on their shares. A company gives limited liability and access to CIT reliefs.",
            potentialSaving=0.0,
            type="structure",
            confidence="low",
            actionLabel="Review partnership agreement",
        ))

    return recs
