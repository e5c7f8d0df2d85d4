"""Global merchant blacklist and history helpers."""

from collections.abc import Iterable
from decimal import Decimal

# Known fraudulent merchant identifiers shared across all users.
GLOBAL_BLACKLIST_MERCHANTS: tuple[str, ...] = (
    "Unknown Merchant",
    "Unverified Seller",
)


def is_globally_blacklisted(
    merchant_name: str | None,
    blacklist: Iterable[str] = GLOBAL_BLACKLIST_MERCHANTS,
) -> bool:
    """Case-insensitive substring match against the blacklist."""
    if not merchant_name:
        return False
    lowered = merchant_name.casefold()
    return any(entry.casefold() in lowered for entry in blacklist if entry)


def average_amount(amounts: Iterable[Decimal]) -> Decimal | None:
    """Mean of the amounts, or None when there are none."""
    values = list(amounts)
    if not values:
        return None
    return sum(values, Decimal("0")) / len(values)
