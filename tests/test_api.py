import pytest
from fastapi.testclient import TestClient

from naijatax.main import app


@pytest.fixture(scope="module")
def client():
    return TestClient(app)


UBER = {"id": "t1", "date": "2026-03-15", "description": "Uber ride to client meeting", "amount": -20000}


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True, "service": "naijatax"}


class TestTaxRoutes:
    def test_pit(self, client):
        r = client.post("/api/tax/pit", json={
            "gross_income": 5_000_000,
            "allowable_deductions": 500_000,
            "actual_rent_paid": 1_000_000,
        })
        assert r.status_code == 200
        assert r.json()["tax_payable"] == pytest.approx(564_000)

    def test_wht(self, client):
        r = client.post("/api/tax/wht", json={"amount": 100_000, "type": "Rent"})
        assert r.json()["tax_payable"] == pytest.approx(10_000)

    def test_paye(self, client):
        body = client.post("/api/tax/paye", json={"gross_salary": 1_000_000}).json()
        assert body["tax_payable"] == pytest.approx(54_000)
        assert body["monthly_tax"] == pytest.approx(4_500)

    def test_invalid_body(self, client):
        r = client.post("/api/tax/pit", json={"gross_income": "lots"})
        assert r.status_code == 422

    def test_deduction_savings(self, client):
        r = client.post("/api/tax/deduction-savings", json={"turnover": 5_000_000, "total_expenses": 2_000_000})
        assert r.status_code == 200
        body = r.json()
        assert body["taxableIncome"] == 3_000_000
        assert body["savings"] == pytest.approx(360_000)

    def test_deduction_savings_unknown_entity(self, client):
        r = client.post("/api/tax/deduction-savings", json={
            "turnover": 5_000_000,
            "total_expenses": 2_000_000,
            "entity_type": "PLC",
        })
        assert r.status_code == 422

    def test_year_comparison(self, client):
        body = client.post("/api/tax/year-comparison", json={
            "current_expenses": 120,
            "last_year_expenses": 100,
            "current_turnover": 500,
        }).json()
        assert body["expenses"]["change"] == pytest.approx(20.0)
        assert body["turnover"]["change"] == 0


class TestAuditRoutes:
    def test_run_missing_receipt(self, client):
        r = client.post("/api/audit/run", json={"transaction": UBER})
        assert r.status_code == 200
        body = r.json()
        assert [f["ruleCode"] for f in body["results"]] == ["DOC_001"]
        assert body["results"][0]["fixAction"] == "disallow"
        assert body["updates"]["audit_status"] == "fail"
        assert body["updates"]["allowable_amount"] == 0
        assert body["audit_log"][0]["rule_code"] == "DOC_001"

    def test_run_ignores_other_transactions_documents(self, client):
        doc = {"id": "d1", "transaction_id": "other", "status": "verified"}
        body = client.post("/api/audit/run", json={"transaction": UBER, "documents": [doc]}).json()
        assert [f["ruleCode"] for f in body["results"]] == ["DOC_001"]

    def test_batch(self, client):
        doc = {"id": "d1", "transaction_id": "t1", "status": "verified"}
        body = client.post("/api/audit/batch", json={"transactions": [UBER], "documents": [doc]}).json()
        assert body["total_findings"] == 0
        assert body["transactions"][0]["audit_status"] == "pass"

    def test_rules(self, client):
        rules = client.get("/api/audit/rules").json()
        assert len(rules) == 12
        assert rules[0]["code"] == "DOC_001"

    def test_checklist_risk(self, client):
        body = client.post("/api/audit/risk", json={"type": "SOLE", "selectedItems": ["owner_salary"]}).json()
        assert body["score"] == 12
        assert body["level"] == "LOW"


class TestComplianceRoutes:
    def test_stats_empty(self, client):
        body = client.post("/api/compliance/stats", json={"transactions": []}).json()
        assert body["overallScore"] == 100
        assert body["status"] == "compliant"

    def test_required_documents(self, client):
        txn = {
            "id": "t9",
            "date": "2026-03-01",
            "description": "Electricity bill for March",
            "amount": -50_000,
            "category_name": "Utilities",
        }
        body = client.post("/api/compliance/required-documents", json=txn).json()
        assert [d["requiredDocType"] for d in body] == ["Utility Bill"]

    def test_validate_document(self, client):
        body = client.post("/api/compliance/validate-document", json={
            "transaction": UBER,
            "document": {"extractedAmount": 30_000},
        }).json()
        assert body["valid"] is False
        assert body["issues"][0]["code"] == "AMOUNT_MISMATCH"


class TestSavingsRoutes:
    def test_recommendations(self, client):
        body = client.post("/api/savings/recommendations", json={
            "profile": {"entity_type": "ltd", "turnover": 20_000_000, "total_assets": 2_000_000, "profit": 4_000_000},
            "as_of": "2026-06-30",
        }).json()
        savings = [r["potentialSaving"] for r in body["recommendations"]]
        assert savings == sorted(savings, reverse=True)
        assert body["total_potential_saving"] >= 0

    def test_tax_at_risk_empty(self, client):
        body = client.post("/api/savings/tax-at-risk", json={"transactions": []}).json()
        assert body["totalAtRisk"] == 0
        assert body["severityLevel"] == "low"


def test_analysis(client):
    r = client.post("/api/analysis", json={
        "profile": {"entity_type": "sole_trader"},
        "transactions": [UBER, {"id": "t2", "date": "2026-03-20", "description": "Sales", "amount": 500_000}],
        "as_of": "2026-06-30",
    })
    assert r.status_code == 200
    body = r.json()
    assert body["income_tax"]["kind"] == "PIT"
    assert body["compliance"]["totalIssues"] == 1
