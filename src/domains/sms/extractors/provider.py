"""Provider detection rules."""

import re

from ..models import Provider
from .base import ExtractionRule


class ProviderKeywordRule(ExtractionRule[Provider]):
    """Matches any of a provider's brand keywords, case-insensitively."""

    field = "provider"

    def __init__(self, rule_id: str, provider: Provider, keywords: tuple[str, ...]) -> None:
        self.rule_id = rule_id
        self.provider = provider
        self.keywords = keywords
        alternatives = "|".join(re.escape(k).replace(r"\ ", r"\s+") for k in keywords)
        self._regex = re.compile(rf"\b(?:{alternatives})\b", re.IGNORECASE)

    def extract(self, text: str) -> Provider | None:
        if self._regex.search(text):
            return self.provider
        return None


# Precedence order: specific brand names first, generic wallet words last.
PROVIDER_RULES: list[ProviderKeywordRule] = [
    ProviderKeywordRule("telecel_cash", Provider.TELECEL_CASH, ("telecel cash", "telecel")),
    ProviderKeywordRule("vodafone_cash", Provider.VODAFONE, ("vodafone cash", "vodafone")),
    ProviderKeywordRule(
        "airteltigo_money", Provider.AIRTELTIGO, ("airteltigo", "airtel tigo", "at money")
    ),
    ProviderKeywordRule("mtn", Provider.MTN, ("mtn",)),
    ProviderKeywordRule("generic_momo", Provider.MTN, ("momo", "mobile money")),
]


def detect_provider(text: str) -> Provider:
    for rule in PROVIDER_RULES:
        provider = rule.extract(text)
        if provider is not None:
            return provider
    return Provider.UNKNOWN
