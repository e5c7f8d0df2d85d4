"""MoMo SMS parsing domain."""

from .models import (
    Counterparty,
    ParsedTime,
    ParsedTransaction,
    Provider,
    TransactionType,
    validate,
)
from .parser import is_momo_message, parse, parse_many
from .segmenter import split_segments

__all__ = [
    "Counterparty",
    "ParsedTime",
    "ParsedTransaction",
    "Provider",
    "TransactionType",
    "is_momo_message",
    "parse",
    "parse_many",
    "split_segments",
    "validate",
]
