from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from loguru import logger

from naijatax.core.compliance_engine import audit_transactions, build_audit_log_entries
from naijatax.core.compliance_rules import AUDIT_RULES, build_audit_rules
from naijatax.core.compliance_stats import calculate_compliance_stats
from naijatax.core.financial_health import calculate_financial_health, generate_health_insights, get_health_rating
from naijatax.core.ledger_summary import summarize_ledger
from naijatax.models.audit import AuditFinding
from naijatax.models.savings import BusinessProfile
from naijatax.models.tax_results import CitInput, PitInput, VatInput
from naijatax.models.transaction import ComplianceDocument, Transaction
from naijatax.savings.recommender import generate_savings_recommendations, total_potential_saving
from naijatax.savings.tax_at_risk import calculate_tax_at_risk
from naijatax.tax_engine.cit import calculate_cit
from naijatax.tax_engine.classifier import categorize_transactions
from naijatax.tax_engine.pit import calculate_pit
from naijatax.tax_engine.vat import calculate_vat


class ComplianceAgent:
    """
    End-to-end pass over a company's ledger:
    categorise -> audit -> stats / tax at risk -> income tax + VAT -> savings -> health.
    """

    def analyze(
        self,
        transactions: Sequence[Transaction],
        documents: Sequence[ComplianceDocument],
        profile: BusinessProfile,
        as_of: Optional[date] = None,
    ) -> Dict[str, Any]:
        as_of = as_of or date.today()
        txns = categorize_transactions(transactions)

        rules = build_audit_rules(profile.turnover) if profile.turnover > 0 else AUDIT_RULES
        audited, runs = audit_transactions(txns, documents, rules)

        findings: List[AuditFinding] = [f for run in runs for f in run.results]
        company_of = {t.id: t.company_id for t in audited}
        audit_log = [
            entry.model_dump()
            for run in runs
            for entry in build_audit_log_entries(run.transaction_id, company_of.get(run.transaction_id), run.results)
        ]

        stats = calculate_compliance_stats(audited, documents, findings)
        tax_at_risk = calculate_tax_at_risk(audited, documents)
        summary = summarize_ledger(audited)

        turnover = profile.turnover or summary.total_inflow
        profit = profile.profit or max(0.0, summary.net_cash_flow)
        income_tax = self._income_tax(profile, turnover, profit)
        vat = calculate_vat(VatInput(
            output_vat=summary.output_vat,
            input_vat=summary.input_vat,
            is_registered=profile.is_registered_for_vat,
        ))

        recommendations = generate_savings_recommendations(profile, audited, as_of=as_of)
        health = calculate_financial_health(summary, audited)

        logger.info(
            "Analysis complete: {} txns, {} findings, compliance={} ({}), tax at risk={}",
            len(audited), len(findings), stats.overallScore, stats.status, tax_at_risk.totalAtRisk,
        )

        return {
            "profile": profile.model_dump(),
            "transactions": [t.model_dump(mode="json") for t in audited],
            "findings": [f.model_dump(mode="json") for f in findings],
            "audit_log": audit_log,
            "compliance": stats.model_dump(),
            "tax_at_risk": tax_at_risk.model_dump(),
            "ledger": summary.model_dump(mode="json"),
            "income_tax": income_tax,
            "vat": vat.model_dump(),
            "recommendations": [r.model_dump() for r in recommendations],
            "total_potential_saving": total_potential_saving(recommendations),
            "health": {
                "breakdown": health.model_dump(),
                "rating": get_health_rating(health.overall).model_dump(),
                "insights": [i.model_dump() for i in generate_health_insights(health, summary, audited)],
            },
        }

    def _income_tax(self, profile: BusinessProfile, turnover: float, profit: float) -> Dict[str, Any]:
        if profile.entity_code == "LTD":
            cit = calculate_cit(CitInput(turnover=turnover, assessable_profit=profit))
            return {"kind": "CIT", **cit.model_dump()}
        pit = calculate_pit(PitInput(gross_income=profit))
        return {"kind": "PIT", **pit.model_dump()}
