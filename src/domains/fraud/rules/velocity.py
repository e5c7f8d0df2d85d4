"""Velocity-based fraud rules."""

from ..config import FraudConfig
from ..models import RiskCategory, RiskContext, RuleResult
from .base import FraudRule


class TransactionVelocityRule(FraudRule):
    """Transaction counts over 1h/3h/24h windows; the highest firing window wins."""

    rule_id = "transaction_velocity"
    category = RiskCategory.VELOCITY

    def evaluate(self, context: RiskContext, config: FraudConfig) -> RuleResult:
        thresholds = config.velocity
        points = 0
        reasons: list[str] = []

        if context.count_1h >= thresholds.count_1h_min:
            points = thresholds.count_1h_points
            reasons.append(
                f"High transaction velocity: {context.count_1h} transactions in last hour"
            )
        if context.count_3h >= thresholds.count_3h_min:
            points = max(points, thresholds.count_3h_points)
            reasons.append(
                f"High transaction velocity: {context.count_3h} transactions in last 3 hours"
            )
        if context.count_24h >= thresholds.count_24h_min:
            points = max(points, thresholds.count_24h_points)
            reasons.append(
                f"Very high transaction velocity: {context.count_24h} transactions "
                "in last 24 hours"
            )

        return self._triggered(
            points=points,
            reasons=reasons,
            evidence={
                "count_1h": context.count_1h,
                "count_3h": context.count_3h,
                "count_24h": context.count_24h,
            },
        )


class DailyLimitRule(FraudRule):
    """Triggers once the user's spend today is past their daily limit."""

    rule_id = "daily_limit"
    category = RiskCategory.DAILY_LIMIT

    def evaluate(self, context: RiskContext, config: FraudConfig) -> RuleResult:
        spent = context.daily_spent
        limit = context.daily_limit
        if not (spent.is_finite() and limit.is_finite()) or spent <= limit:
            return self._not_triggered()

        return self._triggered(
            points=config.daily_limit.exceeded_points,
            reasons=[f"Daily spending limit exceeded (GHS {limit:,.2f}/day)"],
            evidence={"daily_spent": str(spent), "daily_limit": str(limit)},
        )
