"""
Financial health score (0-100) from a ledger summary and its transactions.

Four sub-scores, weighted 30/25/25/20:
  cash flow          positive net flow, runway, history depth
  profitability      net margin ladder
  tax compliance     categorisation, tax tagging, documented sources
  expense management outflow / inflow ladder
"""
from __future__ import annotations

import math
from typing import List, Sequence

from naijatax.core.compliance_stats import round_half_up
from naijatax.models.reports import HealthInsight, HealthRating, HealthScoreBreakdown, LedgerSummary
from naijatax.models.transaction import Transaction


def _is_categorized(txn: Transaction) -> bool:
    return bool(txn.category_name) and "uncategorized" not in txn.category_name.lower()


def cash_flow_score(summary: LedgerSummary, transactions: Sequence[Transaction]) -> int:
    score = 0
    if summary.net_cash_flow > 0:
        score += 40
    elif summary.net_cash_flow > -summary.total_inflow * 0.1:
        score += 20

    monthly_expenses = summary.total_outflow / 12
    if monthly_expenses > 0:
        runway_months = summary.net_cash_flow / monthly_expenses
        if runway_months >= 6:
            score += 30
        elif runway_months >= 3:
            score += 20
        elif runway_months >= 1:
            score += 10

    if len(transactions) > 10:
        score += 30
    elif len(transactions) > 5:
        score += 15

    return min(100, score)


def profit_margin(summary: LedgerSummary) -> float:
    if summary.total_inflow == 0:
        return 0.0
    return summary.net_cash_flow / summary.total_inflow * 100


def profitability_score(summary: LedgerSummary) -> int:
    if summary.total_inflow == 0:
        return 0
    margin = profit_margin(summary)
    for floor, points in ((20, 100), (15, 85), (10, 70), (5, 50), (0, 30), (-10, 15)):
        if margin >= floor:
            return points
    return 0


def tax_compliance_score(transactions: Sequence[Transaction]) -> int:
    n = len(transactions)
    if n == 0:
        return 100

    score = 0
    categorization_rate = sum(1 for t in transactions if _is_categorized(t)) / n * 100
    if categorization_rate >= 90:
        score += 50
    elif categorization_rate >= 75:
        score += 40
    elif categorization_rate >= 50:
        score += 25
    else:
        score += math.floor(categorization_rate / 2)

    tagging_rate = sum(1 for t in transactions if t.is_tagged) / n * 100
    if tagging_rate >= 50:
        score += 30
    elif tagging_rate >= 25:
        score += 20
    elif tagging_rate >= 10:
        score += 10

    documented_rate = sum(1 for t in transactions if t.source_type and t.source_type != "MANUAL") / n * 100
    if documented_rate >= 70:
        score += 20
    elif documented_rate >= 40:
        score += 10
    elif documented_rate >= 20:
        score += 5

    return min(100, score)


def expense_ratio(summary: LedgerSummary) -> float:
    if summary.total_inflow == 0:
        return 0.0
    return summary.total_outflow / summary.total_inflow * 100


def expense_management_score(summary: LedgerSummary) -> int:
    if summary.total_inflow == 0:
        return 50
    ratio = expense_ratio(summary)
    for ceiling, points in ((50, 100), (60, 85), (70, 70), (80, 50), (90, 30), (100, 15)):
        if ratio <= ceiling:
            return points
    return max(0, 15 - math.floor((ratio - 100) / 10))


def calculate_financial_health(summary: LedgerSummary, transactions: Sequence[Transaction]) -> HealthScoreBreakdown:
    cash = cash_flow_score(summary, transactions)
    profit = profitability_score(summary)
    compliance = tax_compliance_score(transactions)
    expenses = expense_management_score(summary)

    overall = round_half_up(cash * 0.30 + profit * 0.25 + compliance * 0.25 + expenses * 0.20)
    return HealthScoreBreakdown(
        overall=overall,
        cashFlowScore=cash,
        profitabilityScore=profit,
        taxComplianceScore=compliance,
        expenseManagementScore=expenses,
    )


def generate_health_insights(
    breakdown: HealthScoreBreakdown,
    summary: LedgerSummary,
    transactions: Sequence[Transaction],
) -> List[HealthInsight]:
    insights: List[HealthInsight] = []

    if breakdown.cashFlowScore < 40:
        insights.append(HealthInsight(
            category="Cash Flow",
            message="Negative cash flow detected",
            severity="critical",
            recommendation="Review expenses and consider revenue optimization strategies",
        ))
    elif breakdown.cashFlowScore >= 80:
        insights.append(HealthInsight(category="Cash Flow", message="Strong cash flow position", severity="positive"))

    margin = profit_margin(summary)
    if margin < 0:
        insights.append(HealthInsight(
            category="Profitability",
            message=f"Operating at a loss ({margin:.1f}% margin)",
            severity="critical",
            recommendation="Urgent: Review cost structure and pricing strategy",
        ))
    elif margin >= 20:
        insights.append(HealthInsight(
            category="Profitability",
            message=f"Excellent profit margin ({margin:.1f}%)",
            severity="positive",
        ))

    uncategorized = sum(1 for t in transactions if not _is_categorized(t))
    if uncategorized > 0:
        insights.append(HealthInsight(
            category="Tax Compliance",
            message=f"{uncategorized} uncategorized transactions",
            severity="critical" if uncategorized > 10 else "warning",
            recommendation="Categorize all transactions to ensure accurate tax calculations",
        ))

    ratio = expense_ratio(summary)
    if ratio > 80:
        insights.append(HealthInsight(
            category="Expense Management",
            message=f"High expense ratio ({ratio:.1f}%)",
            severity="warning",
            recommendation="Identify cost reduction opportunities in top expense categories",
        ))
    elif ratio < 60:
        insights.append(HealthInsight(
            category="Expense Management",
            message=f"Efficient expense management ({ratio:.1f}% ratio)",
            severity="positive",
        ))

    return insights


def get_health_rating(score: int) -> HealthRating:
    if score >= 80:
        return HealthRating(
            label="Excellent",
            color="#10b981",
            description="Your financial health is strong. Keep up the good work!",
        )
    if score >= 60:
        return HealthRating(
            label="Good",
            color="#3b82f6",
            description="Your finances are in good shape with room for improvement.",
        )
    if score >= 40:
        return HealthRating(
            label="Fair",
            color="#f59e0b",
            description="Some areas need attention. Review the recommendations below.",
        )
    return HealthRating(
        label="Poor",
        color="#ef4444",
        description="Immediate action required. Focus on critical issues first.",
    )
