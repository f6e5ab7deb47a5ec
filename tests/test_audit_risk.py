import pytest

from naijatax.core.audit_risk import calculate_audit_risk, calculate_detailed_risk, classify_risk
from naijatax.core.checklists import EXPENSE_CHECKLIST_LTD, EXPENSE_CHECKLIST_SOLE, checklist_for
from naijatax.models.risk import AuditInputs


class TestChecklists:
    def test_ten_categories_each(self):
        assert len(EXPENSE_CHECKLIST_SOLE) == 10
        assert len(EXPENSE_CHECKLIST_LTD) == 10

    def test_checklist_for_entity(self):
        assert checklist_for("LTD") is EXPENSE_CHECKLIST_LTD
        assert checklist_for("SOLE") is EXPENSE_CHECKLIST_SOLE

    def test_checklists_are_immutable(self):
        with pytest.raises(Exception):
            EXPENSE_CHECKLIST_SOLE[0].risk_weight = 99


class TestChecklistScoring:
    def test_category_weight_counted_once(self):
        result = calculate_audit_risk(AuditInputs(type="SOLE", selectedItems=["rent", "electricity", "water"]))
        assert result.score == 3
        assert result.level == "LOW"

    def test_disallowed_item_penalty(self):
        result = calculate_audit_risk(AuditInputs(type="SOLE", selectedItems=["owner_salary"]))
        assert result.score == 2 + 10
        assert result.warnings == ["DISALLOWED: Owner's salary (NOT allowed)"]

    def test_capital_asset_has_no_penalty(self):
        result = calculate_audit_risk(AuditInputs(type="SOLE", selectedItems=["asset_vehicle"]))
        assert result.score == 0
        assert result.warnings == ["CAPITAL ASSET: Vehicle should be claimed via Capital Allowance, not expensed."]
        assert result.suggestions == ["Move Vehicle to Capital Assets schedule."]

    def test_disallowed_capital_item_warns_twice(self):
        result = calculate_audit_risk(AuditInputs(type="SOLE", selectedItems=["new_assets"]))
        assert result.score == 5 + 10
        assert len(result.warnings) == 2


class TestRedFlags:
    def test_ltd_flags_in_rule_order(self):
        inputs = AuditInputs(
            type="LTD",
            turnover=10_000_000,
            profit=1_000_000,
            receiptMissing=True,
            cashOver500k=True,
            noWHT=True,
            transportTotal=3_000_000,
            directorRemuneration=200_000,
        )
        result = calculate_audit_risk(inputs)
        assert result.score == 10 + 8 + 10 + 8 + 10
        assert result.level == "HIGH"
        assert result.riskDrivers == [
            "Missing receipts/invoices",
            "Cash payment > ₦500,000",
            "No WHT deducted",
            "Transport > 20% of turnover",
            "Director remuneration > 15% of profit",
        ]
        assert result.suggestions == [
            "Upload missing receipts.",
            "Deduct WHT and refile.",
            "Reclassify director expenses or reduce.",
        ]

    def test_ltd_medium_threshold(self):
        result = calculate_audit_risk(AuditInputs(type="LTD", receiptMissing=True, noWHT=True, cashOver500k=True))
        assert result.score == 28
        assert result.level == "MEDIUM"

    def test_sole_flags(self):
        result = calculate_audit_risk(AuditInputs(type="SOLE", noSeparateAccount=True, receiptMissing=True))
        assert result.score == 18
        assert result.level == "MEDIUM"

    def test_sole_ratio_rules(self):
        inputs = AuditInputs(
            type="SOLE",
            turnover=1_000_000,
            totalExpenses=800_000,
            transportTotal=300_000,
            phoneInternetTotal=200_000,
        )
        result = calculate_audit_risk(inputs)
        assert result.score == 10 + 8 + 6
        assert "Apply percentage apportionment (e.g., 40%)." in result.suggestions

    def test_ratios_ignored_without_turnover(self):
        result = calculate_audit_risk(AuditInputs(type="SOLE", turnover=0, transportTotal=5_000_000))
        assert result.score == 0

    @pytest.mark.parametrize("entity,expected", [("LTD", 18), ("SOLE", 14)])
    def test_behavioural_penalties(self, entity, expected):
        result = calculate_audit_risk(AuditInputs(type=entity, repeatedLosses=True, suddenSpike=True))
        assert result.score == expected
        assert result.riskDrivers == ["Repeated business losses", "Sudden expense spike (>40%)"]


class TestDeterminism:
    def test_identical_inputs_identical_output(self):
        inputs = AuditInputs(
            type="LTD",
            turnover=50_000_000,
            profit=5_000_000,
            selectedItems=["rent", "director_personal", "plant", "salaries", "principal_repay"],
            receiptMissing=True,
            marketingTotal=20_000_000,
            suddenSpike=True,
        )
        first = calculate_audit_risk(inputs)
        second = calculate_audit_risk(inputs)
        assert first.model_dump() == second.model_dump()


class TestThresholds:
    @pytest.mark.parametrize("score,entity,level", [
        (15, "SOLE", "LOW"),
        (16, "SOLE", "MEDIUM"),
        (36, "SOLE", "HIGH"),
        (20, "LTD", "LOW"),
        (21, "LTD", "MEDIUM"),
        (46, "LTD", "HIGH"),
    ])
    def test_levels(self, score, entity, level):
        assert classify_risk(score, entity) == level


class TestDetailedRisk:
    def test_item_level_weights(self):
        inputs = AuditInputs(type="SOLE", selectedItems=["rent", "electricity", "owner_salary"])
        result = calculate_detailed_risk(inputs)
        assert result.score == 3 + 3 + 10
        assert result.level == "MEDIUM"
        assert result.warnings == ["Owner's salary is NOT ALLOWED"]
        assert result.suggestions == ["Remove Owner's salary"]

    def test_expense_ratio_and_spike(self):
        inputs = AuditInputs(type="LTD", turnover=10_000_000, totalExpenses=7_500_000)
        result = calculate_detailed_risk(inputs, last_year_expenses=5_000_000)
        assert result.score == 16
        assert result.riskDrivers == ["High Expense Ratio", "Spike in expenses"]
        assert "Expenses up 50.0% from last year" in result.warnings
