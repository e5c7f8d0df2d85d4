"""MoMo SMS parser: runs every extraction pass, then validates required fields."""

import datetime as dt

import structlog

from .extractors.amounts import extract_amount, extract_balance, extract_e_levy, extract_fee
from .extractors.counterparty import extract_counterparty
from .extractors.provider import detect_provider
from .extractors.reference import extract_reference
from .extractors.timestamp import extract_date, extract_time, format_display_time
from .extractors.transaction_type import detect_transaction_type
from .models import ParsedTransaction, Provider
from .segmenter import split_segments

logger = structlog.get_logger()


def parse(raw: str, now: dt.datetime | None = None) -> ParsedTransaction:
    """Parse one SMS into a ParsedTransaction. Never raises.

    When `now` is given, a missing date or time is taken from it instead of
    being reported as an error.
    """
    text = raw or ""

    provider = detect_provider(text)
    transaction_type = detect_transaction_type(text)
    amount = extract_amount(text)
    balance = extract_balance(text)
    fee = extract_fee(text)
    e_levy = extract_e_levy(text)
    reference_id = extract_reference(text)
    counterparty = extract_counterparty(text, transaction_type)

    transaction_date = extract_date(text)
    parsed_time = extract_time(text)
    time_display = parsed_time.display if parsed_time else None
    time_24h = parsed_time.value if parsed_time else None

    if now is not None:
        if transaction_date is None:
            transaction_date = now.date()
        if time_24h is None:
            time_24h = now.time().replace(microsecond=0)
            time_display = format_display_time(time_24h)

    transaction = ParsedTransaction(
        provider=provider,
        transaction_type=transaction_type,
        amount=amount,
        counterparty_name=counterparty.name,
        counterparty_number=counterparty.number,
        balance=balance,
        fee=fee,
        e_levy=e_levy,
        reference_id=reference_id,
        transaction_date=transaction_date,
        time=time_display,
        time_24h=time_24h,
        raw_message=text,
    )

    logger.debug(
        "sms_parsed",
        provider=provider.value,
        transaction_type=transaction_type.value,
        is_valid=transaction.is_valid,
        error_count=len(transaction.parse_errors),
        reference_id=reference_id,
    )
    return transaction


def parse_many(raw: str, now: dt.datetime | None = None) -> list[ParsedTransaction]:
    """Parse a message that may hold several concatenated notifications."""
    return [parse(segment, now=now) for segment in split_segments(raw or "")]


def is_momo_message(raw: str) -> bool:
    """True when the text names a known mobile-money provider."""
    return detect_provider(raw or "") != Provider.UNKNOWN

