"""Abstract base class for field extraction rules."""

import re
from abc import ABC, abstractmethod
from collections.abc import Iterable
from decimal import Decimal, InvalidOperation
from typing import Generic, TypeVar

T = TypeVar("T")

# Currency marker followed by a numeral: comma thousands, at most two decimals.
CURRENCY = r"(?:GHS|GH₵|GH¢|₵)"
NUMERAL = r"(?P<value>\d{1,3}(?:,\d{3})+(?:\.\d{1,2})?|\d+(?:\.\d{1,2})?)(?!\d|[.,]\d)"
CURRENCY_NUMERAL = rf"{CURRENCY}\s*{NUMERAL}"


def to_decimal(raw: str) -> Decimal | None:
    """Parse a matched numeral ("2,450.50") into a Decimal."""
    try:
        value = Decimal(raw.replace(",", ""))
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


class ExtractionRule(ABC, Generic[T]):
    """Base class for all extraction rules.

    A rule scans the whole message for one field and returns the value, or
    None when its pattern does not apply. Rules for the same field are kept
    in ordered lists; the first rule that yields a value wins.
    """

    rule_id: str
    field: str

    @abstractmethod
    def extract(self, text: str) -> T | None:
        """Extract this rule's field from the message text."""
        ...


class PatternRule(ExtractionRule[str]):
    """Returns a named group of the first match of a compiled regex."""

    def __init__(
        self,
        rule_id: str,
        field: str,
        pattern: str,
        group: str = "value",
        flags: int = re.IGNORECASE,
    ) -> None:
        self.rule_id = rule_id
        self.field = field
        self.group = group
        self._regex = re.compile(pattern, flags)

    def extract(self, text: str) -> str | None:
        match = self._regex.search(text)
        if not match:
            return None
        value = match.group(self.group)
        return value.strip() if value and value.strip() else None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rule_id!r})"


def first_match(rules: Iterable[ExtractionRule[T]], text: str) -> tuple[T | None, str | None]:
    """Run rules in order and return (value, rule_id) of the first hit."""
    for rule in rules:
        value = rule.extract(text)
        if value is not None:
            return value, rule.rule_id
    return None, None
