"""
Expense checklists used by the audit-risk scorer.

Each category carries a risk weight that is added once when any of its items
is selected. Items flagged as disallowed or capital assets raise warnings.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Tuple

from naijatax.models.risk import ChecklistCategory, ChecklistItem


def _cat(cat_id: str, title: str, weight: int, *items: ChecklistItem) -> ChecklistCategory:
    return ChecklistCategory(id=cat_id, title=title, risk_weight=weight, items=items)


def _item(item_id: str, label: str, **kw) -> ChecklistItem:
    return ChecklistItem(id=item_id, label=label, **kw)


EXPENSE_CHECKLIST_SOLE: Tuple[ChecklistCategory, ...] = (
    _cat(
        "staff_labour", "1. Staff & Labour", 2,
        _item("salaries", "Employee salaries & wages"),
        _item("allowances", "Staff allowances (work-related only)"),
        _item("pension", "Pension contributions"),
        _item("training", "Staff training costs"),
        _item("owner_salary", "Owner's salary", is_disallowed=True, warning="NOT allowed"),
    ),
    _cat(
        "rent_utilities", "2. Rent & Utilities", 3,
        _item("rent", "Shop / office rent"),
        _item("electricity", "Electricity (NEPA)"),
        _item("gen_fuel", "Generator fuel"),
        _item("water", "Water"),
        _item("internet", "Internet"),
        _item("phone", "Business phone line"),
        _item("home_use", "Home use expenses", warning="Apportion % for business use only"),
    ),
    _cat(
        "transport", "3. Transport & Logistics", 6,
        _item("fuel_biz", "Fuel (business trips only)"),
        _item("vehicle_repairs", "Vehicle repairs"),
        _item("vehicle_servicing", "Vehicle servicing"),
        _item("delivery", "Delivery & haulage"),
        _item("personal_trips", "Personal trips", is_disallowed=True, warning="Exclude personal usage"),
    ),
    _cat(
        "professional", "4. Professional & Compliance", 4,
        _item("accountant", "Accountant / tax consultant"),
        _item("legal", "Legal fees (business only)"),
        _item("bookkeeping", "Bookkeeping services"),
        _item("cac", "CAC annual returns"),
        _item("firs", "FIRS / State IRS charges"),
    ),
    _cat(
        "marketing", "5. Marketing & Promotion", 5,
        _item("ads_online", "Online adverts"),
        _item("flyers", "Flyers / banners"),
        _item("branding", "Branding & signage"),
        _item("hosting", "Website hosting"),
        _item("domain", "Domain fees"),
    ),
    _cat(
        "office_ict", "6. Office & ICT", 3,
        _item("stationery", "Stationery"),
        _item("printing", "Printing / photocopying"),
        _item("software", "Software subscriptions"),
        _item("pos", "POS charges"),
        _item("bank_fees", "Bank transaction fees"),
    ),
    _cat(
        "repairs", "7. Repairs & Maintenance", 5,
        _item("equip_repair", "Equipment repairs"),
        _item("gen_servicing", "Generator servicing"),
        _item("shop_repair", "Shop fittings repairs"),
        _item(
            "new_assets", "New assets purchase",
            is_disallowed=True, warning="Capital allowance, not expense", is_capital_asset=True,
        ),
    ),
    _cat(
        "finance", "8. Finance Costs", 6,
        _item("loan_interest", "Interest on business loans"),
        _item("bank_charges", "Bank charges"),
        _item("loan_repayment", "Loan repayment", is_disallowed=True, warning="Not allowed"),
    ),
    _cat(
        "bad_debts", "9. Bad Debts", 7,
        _item("debt_income", "Debt previously recorded as income"),
        _item("debt_irrecoverable", "Debt confirmed irrecoverable"),
        _item("debt_written_off", "Written off in records"),
    ),
    _cat(
        "capital_assets", "10. Capital Assets (DO NOT EXPENSE)", 0,
        _item("asset_vehicle", "Vehicle", is_capital_asset=True),
        _item("asset_computer", "Computer", is_capital_asset=True),
        _item("asset_machinery", "Machinery", is_capital_asset=True),
        _item("asset_equipment", "Equipment", is_capital_asset=True),
    ),
)


EXPENSE_CHECKLIST_LTD: Tuple[ChecklistCategory, ...] = (
    _cat(
        "staff_employment", "1. Staff & Employment Costs", 2,
        _item("salaries", "Salaries & wages"),
        _item("allowances", "Allowances (housing, transport, meal – work-related)"),
        _item("pension_employer", "Employer pension contributions"),
        _item("nhf", "NHF contributions"),
        _item("nsitf", "NSITF contributions"),
        _item("training", "Staff training & development"),
        _item("director_pay", "Directors' remuneration", warning="Allowed if approved & documented"),
    ),
    _cat(
        "rent_utilities", "2. Rent & Utilities", 3,
        _item("rent", "Office / factory rent"),
        _item("electricity", "Electricity (NEPA)"),
        _item("gen_fuel", "Generator fuel"),
        _item("water", "Water"),
        _item("internet", "Internet & data"),
        _item("phone", "Business telephone lines"),
    ),
    _cat(
        "transport", "3. Transport & Logistics", 6,
        _item("fuel_co", "Fuel (company vehicles)"),
        _item("vehicle_maint", "Vehicle servicing & repairs"),
        _item("staff_travel", "Staff official travel"),
        _item("haulage", "Haulage & distribution costs"),
        _item("director_personal", "Personal director trips", is_disallowed=True, warning="Disallow"),
    ),
    _cat(
        "professional", "4. Professional, Regulatory & Compliance", 4,
        _item("audit_fee", "Audit fees"),
        _item("tax_consultant", "Tax consultant fees"),
        _item("legal", "Legal fees (business-related)"),
        _item("cac", "CAC annual returns"),
        _item("levies", "Industry levies"),
        _item("firs", "FIRS / State IRS charges"),
    ),
    _cat(
        "marketing", "5. Marketing, Sales & Promotion", 5,
        _item("ads", "Advertising (online & offline)"),
        _item("branding", "Branding & signage"),
        _item("commissions", "Sales commissions"),
        _item("website", "Website development & hosting"),
        _item("digital_marketing", "Digital marketing tools"),
    ),
    _cat(
        "office_admin", "6. Office, ICT & Administration", 3,
        _item("stationery", "Stationery"),
        _item("printing", "Printing & photocopying"),
        _item("software", "Software subscriptions"),
        _item("pos", "POS charges"),
        _item("bank_charges", "Bank charges"),
        _item("data_processing", "Data processing fees"),
    ),
    _cat(
        "repairs", "7. Repairs & Maintenance", 5,
        _item("machinery_maint", "Machinery maintenance"),
        _item("equip_repair", "Equipment repairs"),
        _item("gen_servicing", "Generator servicing"),
        _item("office_maint", "Office maintenance"),
        _item("asset_upgrades", "Asset upgrades", is_disallowed=True, warning="Capital allowance, not expense"),
    ),
    _cat(
        "finance", "8. Finance Costs", 6,
        _item("loan_interest", "Interest on business loans"),
        _item("bank_interest", "Bank interest & charges"),
        _item("loan_fees", "Loan arrangement fees"),
        _item("principal_repay", "Loan principal repayment", is_disallowed=True, warning="Not allowable"),
    ),
    _cat(
        "bad_debts", "9. Bad Debts", 8,
        _item("debt_income", "Debt previously included as income"),
        _item("irrecoverable", "Confirmed irrecoverable"),
        _item("written_off", "Written off in company books"),
    ),
    _cat(
        "capital_assets", "10. Capital Assets (CLAIM VIA CAPITAL ALLOWANCE)", 0,
        _item("land", "Land", is_capital_asset=True),
        _item("buildings", "Buildings", is_capital_asset=True),
        _item("plant", "Plant & machinery", is_capital_asset=True),
        _item("vehicles", "Vehicles", is_capital_asset=True),
        _item("computers", "Computers & equipment", is_capital_asset=True),
    ),
)


RISK_THRESHOLDS = MappingProxyType({
    "SOLE": MappingProxyType({"medium": 16, "high": 36}),
    "LTD": MappingProxyType({"medium": 21, "high": 46}),
})


def checklist_for(entity_code: str) -> Tuple[ChecklistCategory, ...]:
    return EXPENSE_CHECKLIST_LTD if entity_code == "LTD" else EXPENSE_CHECKLIST_SOLE
