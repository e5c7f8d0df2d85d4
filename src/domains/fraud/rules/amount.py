"""Amount-based fraud rules."""

from ..config import FraudConfig
from ..models import RiskCategory, RiskContext, RuleResult
from .base import FraudRule, ZERO, ghs, safe_amount, safe_decimal


class LargeAmountRule(FraudRule):
    """Scores large amounts and amounts far above the user's average.

    The average check escalates with max() instead of adding, and amounts
    under the small-amount floor always score zero.
    """

    rule_id = "large_amount"
    category = RiskCategory.AMOUNT

    def evaluate(self, context: RiskContext, config: FraudConfig) -> RuleResult:
        amount = safe_amount(context)
        thresholds = config.amount
        points = 0
        reasons: list[str] = []

        if amount > thresholds.very_large_min:
            points = thresholds.very_large_points
            reasons.append(f"Very large transaction amount (>{ghs(thresholds.very_large_min)})")
        elif amount > thresholds.large_min:
            points = thresholds.large_points
            reasons.append(f"Large transaction amount (>{ghs(thresholds.large_min)})")

        average = safe_decimal(context.user_average_amount)
        if average is not None and average > ZERO:
            if amount > average * thresholds.average_multiplier:
                points = max(points, thresholds.average_points)
                reasons.append(
                    f"Transaction amount is {thresholds.average_multiplier}x user average "
                    f"({ghs(average)})"
                )

        evidence = {"amount": str(amount), "user_average_amount": str(average)}
        if amount < thresholds.small_max:
            return self._not_triggered(evidence)

        return self._triggered(points=points, reasons=reasons, evidence=evidence)
