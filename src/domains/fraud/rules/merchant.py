"""Merchant / recipient list rules."""

from ..config import FraudConfig
from ..models import RiskCategory, RiskContext, RuleResult, normalize_merchant
from .base import FraudRule


class MerchantListRule(FraudRule):
    """Blocked and blacklisted recipients add risk; trusted ones reduce it.

    A user block takes precedence over the global blacklist. The trust
    discount only applies when neither matched.
    """

    rule_id = "merchant_lists"
    category = RiskCategory.MERCHANT

    def evaluate(self, context: RiskContext, config: FraudConfig) -> RuleResult:
        scores = config.merchant
        keys = context.counterparty_keys
        blocked = {normalize_merchant(m) for m in context.blocked_merchants}
        trusted = {normalize_merchant(m) for m in context.trusted_merchants}

        is_blocked = bool(keys & blocked)
        points = 0
        reasons: list[str] = []

        if is_blocked:
            points = scores.blocked_points
            reasons.append("Transaction to user-blocked merchant")
        elif context.is_globally_blacklisted:
            points = scores.blacklisted_points
            reasons.append("Transaction to globally blacklisted merchant")
        elif keys & trusted:
            points = scores.trusted_points
            reasons.append(
                f"Transaction to trusted merchant (risk reduced by {abs(scores.trusted_points)})"
            )

        return self._triggered(
            points=points,
            reasons=reasons,
            evidence={
                "counterparty": sorted(keys),
                "blocked": is_blocked,
                "blacklisted": context.is_globally_blacklisted,
            },
        )
