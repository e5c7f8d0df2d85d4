"""Pattern-based fraud rules."""

from ..config import FraudConfig
from ..models import RiskCategory, RiskContext, RuleResult
from .base import FraudRule, safe_amount


class RoundAmountRule(FraudRule):
    """Triggers for exact round amounts (100, 500, 1000, ...)."""

    rule_id = "round_amount"
    category = RiskCategory.ROUND_AMOUNT

    def evaluate(self, context: RiskContext, config: FraudConfig) -> RuleResult:
        amount = safe_amount(context)
        if amount not in config.patterns.round_amounts:
            return self._not_triggered()

        return self._triggered(
            points=config.patterns.round_amount_points,
            reasons=["Transaction amount is a round number (suspicious pattern)"],
            evidence={"amount": str(amount)},
        )
