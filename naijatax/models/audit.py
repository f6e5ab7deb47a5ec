from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel

from naijatax.models.transaction import TransactionUpdate


Severity = Literal["critical", "warning", "info"]


class AuditAction(str, Enum):
    DISALLOW = "disallow"
    LIMIT_50PCT = "limit_50pct"
    FLAG = "flag"
    RECLASSIFY_ASSET = "reclassify_asset"


class RulePassed(BaseModel):
    passed: Literal[True] = True


class RuleFailed(BaseModel):
    passed: Literal[False] = False
    finding: str
    impact: float = 0.0
    action: AuditAction


RuleOutcome = Union[RulePassed, RuleFailed]


class AuditFinding(BaseModel):
    ruleCode: str
    ruleName: str
    severity: Severity
    finding: str
    impactAmount: float
    autoFixed: bool = False
    fixAction: AuditAction


class AuditRun(BaseModel):
    transaction_id: str
    results: List[AuditFinding]
    updates: TransactionUpdate


class AuditLogEntry(BaseModel):
    """Row shape of the audit_logs table written by the persistence layer."""

    transaction_id: str
    company_id: Optional[str] = None
    rule_code: str
    rule_name: str
    severity: Severity
    finding: str
    impact_amount: float
    fix_action: str


class RuleInfo(BaseModel):
    code: str
    name: str
    description: str
    severity: Severity
    legalRef: str
