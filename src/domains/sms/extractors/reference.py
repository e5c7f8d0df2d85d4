"""Transaction reference / ID extraction rules."""

import re

from .base import PatternRule, first_match

REFERENCE_RULES: list[PatternRule] = [
    # Provider batch IDs lead the message, e.g. "0000012062913379 Confirmed."
    PatternRule("leading_batch_id", "reference_id", r"^\s*(?P<value>\d{12,})\b", flags=0),
    PatternRule(
        "financial_transaction_id",
        "reference_id",
        r"financial\s+transaction\s+id[:\s]+(?P<value>[A-Za-z0-9]+)",
    ),
    PatternRule(
        "transaction_id", "reference_id", r"\btransaction\s+id[:\s]+(?P<value>[A-Za-z0-9]+)"
    ),
    PatternRule(
        "transaction_reference",
        "reference_id",
        r"\btransaction\s+reference[:\s]+(?P<value>[A-Za-z0-9]+)",
    ),
    PatternRule("reference", "reference_id", r"\breference[:\s]+(?P<value>[A-Za-z0-9]+)"),
    PatternRule("ref", "reference_id", r"\bref(?:\s*id)?[:.\s]+(?P<value>[A-Za-z0-9]+)"),
]


def extract_reference(text: str) -> str | None:
    return first_match(REFERENCE_RULES, text)[0]
