"""Counterparty extraction rules, keyed by transaction type.

Received messages name the sender, sent messages the receiver, cash-out
messages the merchant and bill payments the biller.
"""

import re

from ..models import Counterparty, TransactionType
from .base import CURRENCY, ExtractionRule

NAME = r"(?P<name>[A-Za-z][A-Za-z0-9'&\- ]*?)"
NUMBER = r"(?P<number>\+?\d{6,15})"
MONEY = rf"(?:{CURRENCY}\s*[\d,.]*\d\s+)?"
# A name runs until punctuation, end of text, or a keyword that opens the next clause.
END = (
    r"(?=\s*[.,;:](?:\s|$)|\s*$|\s+(?:on|at|with|for|has|current|your|new|reference|ref"
    r"|transaction|financial|fee|e-?levy)\b)"
)
SENT_PREFIX = rf"\b(?:sent|transferred|payment\s+made\s+for)\s+{MONEY}to[:\s]+"


class CounterpartyRule(ExtractionRule[Counterparty]):
    """Regex with optional `name` and `number` groups."""

    field = "counterparty"

    def __init__(self, rule_id: str, pattern: str) -> None:
        self.rule_id = rule_id
        self._regex = re.compile(pattern, re.IGNORECASE)

    def extract(self, text: str) -> Counterparty | None:
        match = self._regex.search(text)
        if not match:
            return None
        groups = match.groupdict()
        name = (groups.get("name") or "").strip(" -") or None
        number = groups.get("number") or None
        counterparty = Counterparty(name=name, number=number)
        return None if counterparty.is_empty else counterparty

    def __repr__(self) -> str:
        return f"CounterpartyRule({self.rule_id!r})"


RECEIVED_RULES: list[CounterpartyRule] = [
    CounterpartyRule("from_number_dash_name", rf"\bfrom[:\s]+{NUMBER}\s*-\s*{NAME}{END}"),
    CounterpartyRule("from_number_name", rf"\bfrom[:\s]+{NUMBER}\s+{NAME}{END}"),
    CounterpartyRule("from_name_number", rf"\bfrom[:\s]+{NAME}\s+{NUMBER}\b"),
    CounterpartyRule("from_number", rf"\bfrom[:\s]+{NUMBER}\b"),
    CounterpartyRule("from_name", rf"\bfrom[:\s]+{NAME}{END}"),
]

SENT_RULES: list[CounterpartyRule] = [
    CounterpartyRule("sent_to_number_name", rf"{SENT_PREFIX}{NUMBER}\s*-?\s*{NAME}{END}"),
    CounterpartyRule("sent_to_name_number", rf"{SENT_PREFIX}{NAME}\s+{NUMBER}\b"),
    CounterpartyRule("sent_to_number", rf"{SENT_PREFIX}{NUMBER}\b"),
    CounterpartyRule("sent_to_name", rf"{SENT_PREFIX}{NAME}{END}"),
]

CASH_OUT_RULES: list[CounterpartyRule] = [
    CounterpartyRule("merchant_code_name", rf"\bto\s+{NUMBER}\s*-\s*{NAME}{END}"),
    CounterpartyRule(
        "cash_out_made_for", rf"\bcash\s+out\s+made\s+for\s+{MONEY}to\s+{NAME}{END}"
    ),
    CounterpartyRule("to_name_before_balance", rf"\bto\s+{NAME}\.?\s+(?:current|your)\b"),
]

BILL_PAYMENT_RULES: list[CounterpartyRule] = [
    CounterpartyRule("paid_to", rf"\bpaid\s+to\s+{NAME}{END}"),
    CounterpartyRule(
        "bill_payment_to", rf"\bbill\s+payment\s+(?:of\s+)?{MONEY}to\s+{NAME}{END}"
    ),
]

COUNTERPARTY_RULES: dict[TransactionType, list[CounterpartyRule]] = {
    TransactionType.RECEIVED: RECEIVED_RULES,
    TransactionType.SENT: SENT_RULES,
    TransactionType.CASH_OUT: CASH_OUT_RULES,
    TransactionType.BILL_PAYMENT: BILL_PAYMENT_RULES,
}


def extract_counterparty(text: str, transaction_type: TransactionType) -> Counterparty:
    for rule in COUNTERPARTY_RULES.get(transaction_type, []):
        counterparty = rule.extract(text)
        if counterparty is not None:
            return counterparty
    return Counterparty()
