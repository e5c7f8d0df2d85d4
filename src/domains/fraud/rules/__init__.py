"""Fraud scoring rules package.

Exports ALL_RULES (one rule instance per risk category, in evaluation order)
and the individual rule classes for direct use.
"""

from .amount import LargeAmountRule
from .balance import LowBalanceRule
from .base import FraudRule
from .merchant import MerchantListRule
from .patterns import RoundAmountRule
from .timing import UnusualHourRule
from .velocity import DailyLimitRule, TransactionVelocityRule

# All rule instances in evaluation order
ALL_RULES: list[FraudRule] = [
    UnusualHourRule(),
    LargeAmountRule(),
    DailyLimitRule(),
    TransactionVelocityRule(),
    MerchantListRule(),
    RoundAmountRule(),
    LowBalanceRule(),
]

__all__ = [
    "ALL_RULES",
    "FraudRule",
    "DailyLimitRule",
    "LargeAmountRule",
    "LowBalanceRule",
    "MerchantListRule",
    "RoundAmountRule",
    "TransactionVelocityRule",
    "UnusualHourRule",
]
