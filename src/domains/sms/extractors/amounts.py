"""Money field extraction: amount, balance, fee and E-levy."""

import re
from decimal import Decimal

from .base import CURRENCY_NUMERAL, ExtractionRule, first_match, to_decimal


class LabelledAmountRule(ExtractionRule[Decimal]):
    """A label phrase followed by a currency-marked numeral."""

    def __init__(self, rule_id: str, field: str, label: str) -> None:
        self.rule_id = rule_id
        self.field = field
        self.label = label
        self._regex = re.compile(rf"{label}[:\s]*{CURRENCY_NUMERAL}", re.IGNORECASE)

    def extract(self, text: str) -> Decimal | None:
        match = self._regex.search(text)
        if not match:
            return None
        return to_decimal(match.group("value"))

    def claimed_spans(self, text: str) -> list[tuple[int, int]]:
        """Spans of every numeral this label captures in the text."""
        return [m.span("value") for m in self._regex.finditer(text)]


BALANCE_RULES: list[LabelledAmountRule] = [
    LabelledAmountRule("new_balance", "balance", r"new\s+balance(?:\s+is)?"),
    LabelledAmountRule("current_balance", "balance", r"current\s+balance(?:\s+is)?"),
    LabelledAmountRule(
        "available_balance", "balance", r"available\s+balance(?:\s+is)?"
    ),
    LabelledAmountRule(
        "your_balance_is", "balance", r"your\s+(?:[A-Za-z]+\s+){0,3}balance\s+is"
    ),
    LabelledAmountRule("balance_label", "balance", r"\bbal(?:ance)?"),
]

FEE_RULES: list[LabelledAmountRule] = [
    LabelledAmountRule("you_were_charged", "fee", r"you\s+were\s+charged"),
    LabelledAmountRule("fee_charged", "fee", r"fee\s+charged"),
    LabelledAmountRule("fee_was", "fee", r"fee\s+(?:was|is)"),
]

E_LEVY_RULES: list[LabelledAmountRule] = [
    LabelledAmountRule("e_levy_charge", "e_levy", r"e-?levy\s+charge\s+is"),
    LabelledAmountRule("e_levy_label", "e_levy", r"e-?levy(?:\s+charged)?"),
]

LABELLED_RULES: list[LabelledAmountRule] = [*BALANCE_RULES, *FEE_RULES, *E_LEVY_RULES]


class CurrencyAmountRule(ExtractionRule[Decimal]):
    """First positive currency numeral not claimed by a balance/fee/levy label."""

    rule_id = "currency_amount"
    field = "amount"

    def __init__(self, labelled_rules: list[LabelledAmountRule] | None = None) -> None:
        self._labelled_rules = LABELLED_RULES if labelled_rules is None else labelled_rules
        self._regex = re.compile(CURRENCY_NUMERAL, re.IGNORECASE)

    def extract(self, text: str) -> Decimal | None:
        claimed = {span for rule in self._labelled_rules for span in rule.claimed_spans(text)}
        for match in self._regex.finditer(text):
            if match.span("value") in claimed:
                continue
            value = to_decimal(match.group("value"))
            if value is not None and value > 0:
                return value
        return None


AMOUNT_RULES: list[ExtractionRule[Decimal]] = [CurrencyAmountRule()]


def extract_amount(text: str) -> Decimal | None:
    return first_match(AMOUNT_RULES, text)[0]


def extract_balance(text: str) -> Decimal | None:
    return first_match(BALANCE_RULES, text)[0]


def extract_fee(text: str) -> Decimal | None:
    return first_match(FEE_RULES, text)[0]


def extract_e_levy(text: str) -> Decimal | None:
    return first_match(E_LEVY_RULES, text)[0]
