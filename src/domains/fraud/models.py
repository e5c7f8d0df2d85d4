"""Pydantic models for the fraud domain."""

from datetime import datetime
from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, Field

from src.domains.sms.models import ParsedTransaction, TransactionType


class RiskLevel(StrEnum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class RiskCategory(StrEnum):
    TIME = "time"
    AMOUNT = "amount"
    DAILY_LIMIT = "daily_limit"
    VELOCITY = "velocity"
    MERCHANT = "merchant"
    ROUND_AMOUNT = "round_amount"
    BALANCE = "balance"


class RuleResult(BaseModel):
    rule_name: str
    category: RiskCategory
    points: int = 0
    reasons: list[str] = Field(default_factory=list)
    evidence: dict = Field(default_factory=dict)

    @property
    def triggered(self) -> bool:
        return self.points != 0


class RiskContext(BaseModel):
    """Signals gathered by the caller before scoring.

    Transaction facts left as None are filled from the ParsedTransaction when
    scoring; the remaining fields come from history and user settings.
    """

    amount: Decimal | None = None
    balance: Decimal | None = None
    transaction_type: TransactionType | None = None
    transaction_at: datetime | None = None
    counterparty_name: str | None = None
    counterparty_number: str | None = None

    user_average_amount: Decimal | None = None
    daily_spent: Decimal = Decimal("0")
    daily_limit: Decimal = Decimal("2000")
    count_1h: int = Field(default=0, ge=0)
    count_3h: int = Field(default=0, ge=0)
    count_24h: int = Field(default=0, ge=0)
    blocked_merchants: frozenset[str] = frozenset()
    trusted_merchants: frozenset[str] = frozenset()
    is_globally_blacklisted: bool = False

    def with_transaction(self, transaction: ParsedTransaction) -> "RiskContext":
        """Return a copy with missing transaction facts taken from `transaction`."""
        updates = {}
        if self.amount is None:
            updates["amount"] = transaction.amount
        if self.balance is None:
            updates["balance"] = transaction.balance
        if self.transaction_type is None:
            updates["transaction_type"] = transaction.transaction_type
        if self.transaction_at is None:
            updates["transaction_at"] = transaction.occurred_at
        if self.counterparty_name is None:
            updates["counterparty_name"] = transaction.counterparty_name
        if self.counterparty_number is None:
            updates["counterparty_number"] = transaction.counterparty_number
        return self.model_copy(update=updates)

    @property
    def counterparty_keys(self) -> set[str]:
        """Normalised identifiers used for merchant list lookups."""
        return {
            normalize_merchant(v)
            for v in (self.counterparty_name, self.counterparty_number)
            if v and v.strip()
        }


def normalize_merchant(value: str) -> str:
    return " ".join(value.split()).casefold()


class RiskResult(BaseModel):
    score: int = Field(ge=0, le=100)
    level: RiskLevel
    reasons: list[str] = Field(default_factory=list)
    breakdown: dict[str, int] = Field(default_factory=dict)


class FraudAlert(BaseModel):
    should_alert: bool
    level: RiskLevel
    message: str
    priority: str = "normal"
    include_sound: bool = False
    include_vibration: bool = False
    score: int = 0
    reasons: list[str] = Field(default_factory=list)


class AnalysisResult(BaseModel):
    transaction: ParsedTransaction
    risk: RiskResult | None = None
    alert: FraudAlert | None = None
    analyzed_at: datetime
