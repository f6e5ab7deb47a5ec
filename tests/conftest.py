import itertools
from datetime import date

import pytest

from naijatax.models.transaction import ComplianceDocument, OcrData, Transaction


@pytest.fixture
def make_txn():
    counter = itertools.count(1)

    def _make(amount, description="Office stationery purchase", category=None, on=date(2026, 3, 15), **kw):
        txn_id = kw.pop("id", f"t{next(counter)}")
        return Transaction(
            id=txn_id,
            date=on,
            description=description,
            amount=amount,
            category_name=category,
            **kw,
        )

    return _make


@pytest.fixture
def make_doc():
    counter = itertools.count(1)

    def _make(transaction_id, status="verified", ocr_date=None, ocr_amount=None, document_type="Receipt"):
        ocr = None
        if ocr_date is not None or ocr_amount is not None:
            ocr = OcrData(date=ocr_date, amount=ocr_amount)
        return ComplianceDocument(
            id=f"d{next(counter)}",
            transaction_id=transaction_id,
            document_type=document_type,
            status=status,
            ocr_data=ocr,
        )

    return _make
