from __future__ import annotations

import re
from typing import List

from naijatax.models.savings import BusinessProfile, SavingsRecommendation
from naijatax.tax_engine.statutory import CIT_STANDARD_RATE, SBE_EXCLUDED_SECTORS, SMALL_BUSINESS_THRESHOLD


SBE_WARNING_SHARE = 0.90

PIONEER_SECTORS = ("manufacturing", "agriculture", "agro", "mining", "technology", "tech", "ict", "solar", "renewable")
GAS_SECTORS = ("gas", "oil", "energy", "petroleum")
INVESTMENT_CREDIT_SECTORS = ("manufacturing", "agriculture", "agro", "mining", "construction")


def _sector_matches(sector: str, keys) -> bool:
    words = re.findall(r"[a-z]+", (sector or "").lower())
    return any(w.startswith(k) for w in words for k in keys)


def is_excluded_sector(sector: str) -> bool:
    s = (sector or "").strip().lower()
    return any(excluded in s for excluded in SBE_EXCLUDED_SECTORS)


def qualifies_for_small_business_exemption(profile: BusinessProfile) -> bool:
    return (
        profile.turnover <= SMALL_BUSINESS_THRESHOLD
        and profile.total_assets <= SMALL_BUSINESS_THRESHOLD
        and not is_excluded_sector(profile.sector)
    )


def analyze_reliefs(profile: BusinessProfile) -> List[SavingsRecommendation]:
    """
    Small Business Exemption and sector incentives.

    Incentives need approval from NIPC, NEPC or the Ministry, so they are never
    reported with high confidence.
    """
    recs: List[SavingsRecommendation] = []
    profit = max(0.0, profile.profit)

    if qualifies_for_small_business_exemption(profile):
        recs.append(SavingsRecommendation(
            id="relief_small_business_exemption",
            title="Small Business Exemption (0% CIT)",
            description=(
                f"Turnover ₦{profile.turnover:,.0f} and assets ₦{profile.total_assets:,.0f} are within the "
                f"₦{SMALL_BUSINESS_THRESHOLD:,.0f} limit. File as a small company to pay 0% CIT."
            ),
            potentialSaving=profit * CIT_STANDARD_RATE,
            type="relief",
            confidence="high",
            actionLabel="Claim exemption on return",
        ))
        if profile.turnover >= SMALL_BUSINESS_THRESHOLD * SBE_WARNING_SHARE:
            recs.append(SavingsRecommendation(
                id="warning_small_business_threshold",
                title="Close to the small business threshold",
                description=(
                    f"Turnover is {profile.turnover / SMALL_BUSINESS_THRESHOLD:.0%} of the ₦25m limit. "
                    "Crossing it removes the 0% CIT exemption."
                ),
                potentialSaving=0.0,
                type="warning",
                confidence="high",
                actionLabel="Monitor turnover",
            ))

    if _sector_matches(profile.sector, PIONEER_SECTORS):
        recs.append(SavingsRecommendation(
            id="incentive_pioneer_status",
            title="Pioneer Status Incentive",
            description="Qualifying sectors can get a 3-5 year CIT holiday. Requires NIPC approval.",
            potentialSaving=profit * CIT_STANDARD_RATE,
            type="incentive",
            confidence="low",
            actionLabel="Check NIPC eligibility",
        ))

    if profile.export_revenue > 0:
        recs.append(SavingsRecommendation(
            id="incentive_export_expansion_grant",
            title="Export Expansion Grant",
            description=(
                f"₦{profile.export_revenue:,.0f} of export revenue may qualify for EEG credits. "
                "Apply through NEPC."
            ),
            potentialSaving=profile.export_revenue * 0.10,
            type="incentive",
            confidence="medium",
            actionLabel="Apply via NEPC",
        ))

    if _sector_matches(profile.sector, INVESTMENT_CREDIT_SECTORS):
        recs.append(SavingsRecommendation(
            id="incentive_investment_tax_credit",
            title="Investment Tax Credit",
            description="Qualifying capital investment in priority sectors earns a credit against CIT.",
            potentialSaving=profile.total_assets * 0.05,
            type="incentive",
            confidence="low",
            actionLabel="Review capital investment plan",
        ))

    if _sector_matches(profile.sector, GAS_SECTORS):
        recs.append(SavingsRecommendation(
            id="incentive_gas_utilization",
            title="Gas Utilization Incentive",
            description="Gas utilisation projects may get an extended tax-free period and accelerated allowances.",
            potentialSaving=profit * CIT_STANDARD_RATE * 0.5,
            type="incentive",
            confidence="low",
            actionLabel="Consult FIRS on eligibility",
        ))

    return recs
