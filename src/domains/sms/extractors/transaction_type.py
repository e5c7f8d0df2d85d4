"""Transaction type detection rules."""

import re

from ..models import TransactionType
from .base import ExtractionRule


class TypeKeywordRule(ExtractionRule[TransactionType]):
    """Matches whole-word phrases that mark one transaction type."""

    field = "transaction_type"

    def __init__(self, transaction_type: TransactionType, phrases: tuple[str, ...]) -> None:
        self.rule_id = f"type_{transaction_type.value}"
        self.transaction_type = transaction_type
        self.phrases = phrases
        self._regex = re.compile(rf"\b(?:{'|'.join(phrases)})\b", re.IGNORECASE)

    def extract(self, text: str) -> TransactionType | None:
        if self._regex.search(text):
            return self.transaction_type
        return None


# Checked in order; more specific types come before the generic sent/received.
TYPE_RULES: list[TypeKeywordRule] = [
    TypeKeywordRule(TransactionType.CASH_OUT, (r"cash[\s-]*out",)),
    TypeKeywordRule(TransactionType.WITHDRAWAL, (r"withdraw(?:al|n|ed)?",)),
    TypeKeywordRule(TransactionType.AIRTIME, (r"airtime", r"air\s+time", r"recharge(?:d)?")),
    TypeKeywordRule(
        TransactionType.BILL_PAYMENT,
        (r"bill\s+payment", r"bill\s+pay", r"paid\s+to\s+(?:ECG|Ghana\s+Water)"),
    ),
    TypeKeywordRule(TransactionType.DEPOSIT, (r"deposit(?:ed)?", r"cash\s+in")),
    TypeKeywordRule(
        TransactionType.SENT,
        (r"sent", r"transferred", r"transfer\s+to", r"payment\s+made\s+for"),
    ),
    TypeKeywordRule(TransactionType.RECEIVED, (r"received", r"credited")),
]


def detect_transaction_type(text: str) -> TransactionType:
    for rule in TYPE_RULES:
        transaction_type = rule.extract(text)
        if transaction_type is not None:
            return transaction_type
    return TransactionType.UNKNOWN
