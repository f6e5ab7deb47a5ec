"""
Statutory tables for the Nigeria Tax Act 2025 regime (effective 2026).

Band tables are (width, rate) pairs applied in order; a width of ``inf``
takes the remainder. Everything here is read-only at runtime.
"""
from __future__ import annotations

from types import MappingProxyType

INF = float("inf")

# =========================
# PERSONAL INCOME TAX
# =========================
PIT_EXEMPT_THRESHOLD = 800_000.0

PIT_BANDS = (
    (800_000.0, 0.00),
    (2_200_000.0, 0.15),
    (9_000_000.0, 0.18),
    (13_000_000.0, 0.21),
    (25_000_000.0, 0.23),
    (INF, 0.25),
)

RENT_RELIEF_RATE = 0.20
RENT_RELIEF_CAP = 500_000.0

# =========================
# PAYE (legacy CRA regime, used by remuneration planning)
# =========================
PAYE_CRA_FLOOR = 200_000.0
PAYE_CRA_FLOOR_RATE = 0.01
PAYE_CRA_VARIABLE_RATE = 0.20

PAYE_BANDS = (
    (300_000.0, 0.07),
    (300_000.0, 0.11),
    (500_000.0, 0.15),
    (500_000.0, 0.19),
    (1_600_000.0, 0.21),
    (INF, 0.24),
)

# =========================
# COMPANY INCOME TAX
# =========================
CIT_SMALL_TURNOVER = 100_000_000.0
CIT_MEDIUM_TURNOVER = 50_000_000_000.0
CIT_STANDARD_RATE = 0.30
DEVELOPMENT_LEVY_RATE = 0.04

CIT_CATEGORIES = MappingProxyType({
    "Small": {"tax_rate": 0.0, "levy_rate": 0.0},
    "Medium": {"tax_rate": CIT_STANDARD_RATE, "levy_rate": DEVELOPMENT_LEVY_RATE},
    "Large": {"tax_rate": CIT_STANDARD_RATE, "levy_rate": DEVELOPMENT_LEVY_RATE},
})

# Small Business Exemption used by relief and structure planning
SMALL_BUSINESS_THRESHOLD = 25_000_000.0
SBE_EXCLUDED_SECTORS = frozenset({"banking", "insurance", "aviation", "marine", "bureau de change"})

# =========================
# VAT
# =========================
VAT_RATE = 0.075

# =========================
# WITHHOLDING TAX
# =========================
WHT_RATES = MappingProxyType({
    "Dividend": 0.10,
    "Interest": 0.10,
    "Royalty": 0.10,
    "Rent": 0.10,
    "Contract": 0.05,
    "Professional": 0.05,
    "Consultancy": 0.05,
    "Commission": 0.05,
    "DirectorFee": 0.10,
    "SalesOfGoods": 0.02,
})

DIVIDEND_WHT_RATE = WHT_RATES["Dividend"]

# =========================
# CAPITAL GAINS
# =========================
CGT_COMPANY_RATE = 0.30

# =========================
# CAPITAL ALLOWANCES
# =========================
INVESTMENT_ALLOWANCE_RATE = 0.95
CAPITAL_ASSET_MIN_COST = 500_000.0

CAPITAL_ALLOWANCE_CLASSES = MappingProxyType({
    "computer_equipment": {
        "label": "Computer Equipment",
        "rate": 0.25,
        "investment_allowance": False,
        "keywords": ("laptop", "computer", "macbook", "desktop", "server", "printer", "ipad", "tablet", "monitor"),
    },
    "furniture": {
        "label": "Furniture & Fittings",
        "rate": 0.20,
        "investment_allowance": False,
        "keywords": ("furniture", "desk", "chair", "cabinet", "shelf", "table", "fittings"),
    },
    "vehicles": {
        "label": "Motor Vehicles",
        "rate": 0.25,
        "investment_allowance": False,
        "keywords": ("vehicle", "car", "truck", "bus", "motorcycle", "toyota", "hilux", "van"),
    },
    "plant_machinery": {
        "label": "Plant & Machinery",
        "rate": 0.20,
        "investment_allowance": True,
        "keywords": ("generator", "machinery", "machine", "plant", "equipment", "compressor", "inverter"),
    },
    "buildings": {
        "label": "Buildings",
        "rate": 0.10,
        "investment_allowance": False,
        "keywords": ("building", "construction", "warehouse", "office block", "renovation"),
    },
})

# =========================
# METADATA
# =========================
TAX_DISCLAIMER = (
    "These are estimates only and do not constitute an official filing with FIRS "
    "or any State Internal Revenue Service. Consult a licensed tax professional."
)
