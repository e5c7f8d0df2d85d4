"""Field extraction rules.

Each field has an ordered list of named rules; the first rule that yields a
value wins. Rule lists are exported for direct use and testing.
"""

from .amounts import AMOUNT_RULES, BALANCE_RULES, E_LEVY_RULES, FEE_RULES
from .base import ExtractionRule, PatternRule, first_match
from .counterparty import COUNTERPARTY_RULES
from .provider import PROVIDER_RULES
from .reference import REFERENCE_RULES
from .timestamp import DATE_RULES, TIME_RULES
from .transaction_type import TYPE_RULES

__all__ = [
    "AMOUNT_RULES",
    "BALANCE_RULES",
    "COUNTERPARTY_RULES",
    "DATE_RULES",
    "E_LEVY_RULES",
    "ExtractionRule",
    "FEE_RULES",
    "PROVIDER_RULES",
    "PatternRule",
    "REFERENCE_RULES",
    "TIME_RULES",
    "TYPE_RULES",
    "first_match",
]
