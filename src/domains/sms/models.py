"""Pydantic models for the SMS parsing domain."""

import datetime as dt
from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, Field, model_validator


class Provider(StrEnum):
    MTN = "MTN"
    VODAFONE = "Vodafone"
    AIRTELTIGO = "AirtelTigo"
    TELECEL_CASH = "TelecelCash"
    UNKNOWN = "Unknown"


class TransactionType(StrEnum):
    SENT = "sent"
    RECEIVED = "received"
    WITHDRAWAL = "withdrawal"
    DEPOSIT = "deposit"
    CASH_OUT = "cash_out"
    AIRTIME = "airtime"
    BILL_PAYMENT = "bill_payment"
    UNKNOWN = "unknown"


class Counterparty(BaseModel):
    name: str | None = None
    number: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.name is None and self.number is None


class ParsedTime(BaseModel):
    """A clock time found in a message, in both display and 24-hour form."""

    display: str  # "H:MM AM/PM"
    value: dt.time


class ParsedTransaction(BaseModel):
    provider: Provider = Provider.UNKNOWN
    transaction_type: TransactionType = TransactionType.UNKNOWN
    amount: Decimal | None = None
    counterparty_name: str | None = None
    counterparty_number: str | None = None
    balance: Decimal | None = None
    fee: Decimal | None = None
    e_levy: Decimal | None = None
    reference_id: str | None = None
    transaction_date: dt.date | None = None
    time: str | None = None
    time_24h: dt.time | None = None
    is_valid: bool = False
    parse_errors: list[str] = Field(default_factory=list)
    raw_message: str = ""

    @model_validator(mode="after")
    def _derive_validity(self) -> "ParsedTransaction":
        # Validity always follows the required fields, whatever the caller passed
        self.parse_errors = validate(
            self.transaction_type,
            self.provider,
            self.amount,
            self.transaction_date,
            self.time_24h,
            Counterparty(name=self.counterparty_name, number=self.counterparty_number),
        )
        self.is_valid = not self.parse_errors
        return self

    @property
    def occurred_at(self) -> dt.datetime | None:
        if self.transaction_date is None or self.time_24h is None:
            return None
        return dt.datetime.combine(self.transaction_date, self.time_24h)

    @property
    def sender_name(self) -> str | None:
        if self.transaction_type != TransactionType.RECEIVED:
            return None
        return self.counterparty_name

    @property
    def sender_number(self) -> str | None:
        if self.transaction_type != TransactionType.RECEIVED:
            return None
        return self.counterparty_number

    @property
    def receiver_name(self) -> str | None:
        if self.transaction_type != TransactionType.SENT:
            return None
        return self.counterparty_name

    @property
    def receiver_number(self) -> str | None:
        if self.transaction_type != TransactionType.SENT:
            return None
        return self.counterparty_number

    @property
    def merchant_name(self) -> str | None:
        if self.transaction_type != TransactionType.CASH_OUT:
            return None
        return self.counterparty_name


# Counterparty requirement per type: (error message, fields that satisfy it).
_COUNTERPARTY_REQUIREMENTS: dict[TransactionType, tuple[str, tuple[str, ...]]] = {
    TransactionType.RECEIVED: ("Sender information missing", ("name", "number")),
    TransactionType.SENT: ("Receiver information missing", ("name", "number")),
    TransactionType.CASH_OUT: ("Merchant name missing", ("name",)),
}


def validate(
    transaction_type: TransactionType,
    provider: Provider,
    amount: Decimal | None,
    transaction_date: dt.date | None,
    time_24h: dt.time | None,
    counterparty: Counterparty,
) -> list[str]:
    """Return one error per missing required field; empty means valid."""
    errors: list[str] = []
    if transaction_type == TransactionType.UNKNOWN:
        errors.append("Transaction type not detected")
    if provider == Provider.UNKNOWN:
        errors.append("Provider not detected")
    if amount is None:
        errors.append("Amount not found")
    if transaction_date is None:
        errors.append("Transaction date not found")
    if time_24h is None:
        errors.append("Transaction time not found")

    requirement = _COUNTERPARTY_REQUIREMENTS.get(transaction_type)
    if requirement is not None:
        message, fields = requirement
        if not any(getattr(counterparty, f) for f in fields):
            errors.append(message)
    return errors
