import re
from typing import Dict, Iterable, List, Optional, Tuple

from naijatax.models.transaction import Transaction


# Order matters: the first category with a matching keyword wins.
_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "Transport & Travel": (
        "uber", "bolt", "fuel", "diesel", "petrol", "total", "shell", "oando",
        "air peace", "flight", "ticket", "transport", "parking",
    ),
    "Utilities": ("nepa", "phcn", "ekedc", "ikedc", "aedc", "electricity", "water", "waste", "lawma"),
    "Telephone & Internet": ("mtn", "glo", "airtel", "9mobile", "spectranet", "starlink", "data", "recharge", "internet"),
    "Bank Charges": ("bank charges", "sms alert", "maintenance fee", "cot", "transfer fee", "stamp duty", "fgn"),
    "Salaries & Wages": ("salary", "wages", "stipend", "allowance", "payroll", "consultant"),
    "Rent": ("rent", "lease", "tenancy"),
    "Professional Fees": ("legal", "audit", "accounting", "tax", "consulting", "firs", "lirs"),
    "Meals & Entertainment": ("restaurant", "food", "kfc", "chicken", "dominion", "pizza", "lunch", "dinner"),
    "Store Supplies": ("paper", "ink", "stationery", "printer", "office"),
    "Software & Subscriptions": (
        "google", "aws", "azure", "digital ocean", "hosting", "domain", "zoom",
        "slack", "microsoft", "adobe",
    ),
}


def _norm(s: str) -> str:
    return re.sub(r"\s+", " ", (s or "").lower()).strip()


def auto_categorize(description: str) -> Optional[str]:
    """Keyword match on the narration; None when nothing matches."""
    d = _norm(description)
    for category, keys in _KEYWORDS.items():
        if any(k in d for k in keys):
            return category
    return None


def categorize_transactions(transactions: Iterable[Transaction]) -> List[Transaction]:
    """Fill category_name where it is missing; categories set by the user are kept."""
    out: List[Transaction] = []
    for txn in transactions:
        if txn.category_name:
            out.append(txn)
            continue
        category = auto_categorize(txn.description)
        out.append(txn.model_copy(update={"category_name": category}) if category else txn)
    return out
