import pytest

from naijatax.savings.tax_at_risk import calculate_tax_at_risk, evidence_status, severity_for
from naijatax.tax_engine.statutory import TAX_DISCLAIMER


@pytest.fixture
def ledger(make_txn):
    return [
        make_txn(-100_000, "Cash withdrawal", id="t1", audit_status="fail", allowability_status="non_allowable"),
        make_txn(-50_000, "Consultancy fee", id="t2", tax_tag="WHT", audit_status="pass"),
        make_txn(1_000_000, "Customer payment", id="t3", audit_status="pass"),
        make_txn(-400_000, "Owner's holiday", id="t4", tax_tag="Personal", audit_status="fail"),
    ]


class TestTaxAtRisk:
    def test_mixed_ledger(self, ledger):
        result = calculate_tax_at_risk(ledger)

        assert [b.category for b in result.breakdown] == ["Documentation", "Allowability", "WHT"]
        assert result.totalAtRisk == pytest.approx(65_000)
        assert result.currentTaxLiability == pytest.approx(255_000)
        assert result.potentialTaxLiability == pytest.approx(320_000)
        assert result.estimatedPenalties == pytest.approx(500)
        assert result.severityLevel == "low"
        assert result.progressMetrics.totalIssues == 2
        assert result.progressMetrics.resolvedIssues == 2
        assert result.progressMetrics.percentageResolved == 50
        assert result.note == TAX_DISCLAIMER

    def test_personal_lines_ignored(self, ledger):
        result = calculate_tax_at_risk(ledger)
        assert all("t4" not in b.affectedTransactions for b in result.breakdown)

    def test_missing_evidence_is_high_confidence(self, ledger):
        wht = calculate_tax_at_risk(ledger).breakdown[-1]
        assert wht.affectedTransactions == ["t2"]
        assert wht.evidenceStatus == "missing"
        assert wht.confidenceLevel == "high"
        assert wht.taxRate == 0.10

    def test_document_clears_wht_issue(self, ledger, make_doc):
        result = calculate_tax_at_risk(ledger, [make_doc("t2", status="pending")])
        assert [b.category for b in result.breakdown] == ["Documentation", "Allowability"]
        assert result.estimatedPenalties == 0

    def test_rejected_document_is_not_evidence(self, ledger, make_doc):
        result = calculate_tax_at_risk(ledger, [make_doc("t2", status="rejected")])
        assert result.breakdown[-1].category == "WHT"

    def test_partial_allowability(self, make_txn):
        txn = make_txn(-300_000, "Client dinner", "Entertainment", audit_status="review",
                       allowability_status="partial", allowable_amount=200_000, document_ids=["d1"])
        allowability = calculate_tax_at_risk([txn]).breakdown[1]
        assert allowability.disallowedAmount == pytest.approx(100_000)
        assert allowability.taxAtRisk == pytest.approx(30_000)
        assert allowability.evidenceStatus == "complete"
        assert allowability.confidenceLevel == "low"

    def test_clean_ledger(self, make_txn):
        result = calculate_tax_at_risk([make_txn(500_000, "Sales", audit_status="pass")])
        assert result.totalAtRisk == 0
        assert result.breakdown == []
        assert result.potentialTaxLiability >= result.currentTaxLiability
        assert result.progressMetrics.percentageResolved == 100

    def test_empty_ledger(self):
        result = calculate_tax_at_risk([])
        assert result.currentTaxLiability == 0
        assert result.progressMetrics.percentageResolved == 100

    def test_loss_has_no_negative_liability(self, make_txn):
        result = calculate_tax_at_risk([make_txn(-900_000, "Stock purchase", audit_status="pass")])
        assert result.currentTaxLiability == 0


class TestSeverity:
    @pytest.mark.parametrize("amount,level", [
        (0, "low"),
        (99_999, "low"),
        (100_000, "medium"),
        (500_000, "high"),
        (1_000_000, "critical"),
    ])
    def test_bands(self, amount, level):
        assert severity_for(amount) == level

    def test_evidence_status(self):
        assert evidence_status(2, 2) == "complete"
        assert evidence_status(1, 2) == "partial"
        assert evidence_status(0, 2) == "missing"
