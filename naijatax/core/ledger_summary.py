from __future__ import annotations

from typing import Sequence

import pandas as pd

from naijatax.models.reports import LedgerSummary
from naijatax.models.transaction import Transaction
from naijatax.tax_engine.vat import vat_from_inclusive_amount


FRAME_COLUMNS = [
    "id",
    "date",
    "description",
    "amount",
    "category",
    "tax_tag",
    "audit_status",
    "allowability_status",
    "allowable_amount",
    "has_evidence",
    "business",
]


def is_business_transaction(txn: Transaction) -> bool:
    """Personal-tagged, excluded and non-business lines stay out of every tax aggregate."""
    return txn.is_business and not txn.excluded_from_tax and txn.tax_tag != "Personal"


def transactions_frame(transactions: Sequence[Transaction]) -> pd.DataFrame:
    """
    Flatten transactions into a DataFrame:
    id, date (datetime64), description, amount (signed), category, tax_tag,
    audit fields, has_evidence, business
    """
    rows = [
        {
            "id": t.id,
            "date": t.date,
            "description": t.description,
            "amount": float(t.amount),
            "category": t.category,
            "tax_tag": t.tax_tag,
            "audit_status": t.audit_status,
            "allowability_status": t.allowability_status,
            "allowable_amount": t.allowable_amount,
            "has_evidence": t.has_evidence,
            "business": is_business_transaction(t),
        }
        for t in transactions
    ]
    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    df["date"] = pd.to_datetime(df["date"], errors="coerce")
    df["amount"] = pd.to_numeric(df["amount"], errors="coerce").fillna(0.0)
    return df


def summarize_ledger(transactions: Sequence[Transaction]) -> LedgerSummary:
    df = transactions_frame(transactions)
    biz = df[df["business"] == True]  # noqa: E712

    inflows = biz[biz["amount"] > 0]["amount"]
    outflows = biz[biz["amount"] < 0]["amount"].abs()

    vat_tagged = biz[biz["tax_tag"] == "VAT"]
    output_vat = sum(vat_from_inclusive_amount(a) for a in vat_tagged[vat_tagged["amount"] > 0]["amount"])
    input_vat = sum(vat_from_inclusive_amount(-a) for a in vat_tagged[vat_tagged["amount"] < 0]["amount"])

    total_inflow = float(inflows.sum())
    total_outflow = float(outflows.sum())

    return LedgerSummary(
        total_inflow=total_inflow,
        total_outflow=total_outflow,
        net_cash_flow=total_inflow - total_outflow,
        transaction_count=int(len(df)),
        business_transaction_count=int(len(biz)),
        output_vat=float(output_vat),
        input_vat=float(input_vat),
        period_start=df["date"].min().date() if not df.empty else None,
        period_end=df["date"].max().date() if not df.empty else None,
    )
