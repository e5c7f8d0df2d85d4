"""Time-of-day fraud rule."""

from ..config import FraudConfig
from ..models import RiskCategory, RiskContext, RuleResult
from .base import FraudRule


class UnusualHourRule(FraudRule):
    """Flags early-morning (2-5 AM) and late-night (10 PM-1 AM) transactions."""

    rule_id = "unusual_hour"
    category = RiskCategory.TIME

    def evaluate(self, context: RiskContext, config: FraudConfig) -> RuleResult:
        if context.transaction_at is None:
            return self._not_triggered()

        hour = context.transaction_at.hour
        thresholds = config.time
        start, end = thresholds.early_morning_hours

        if start <= hour < end:
            return self._triggered(
                points=thresholds.early_morning_points,
                reasons=["Transaction during unusual early morning hours (2am-5am)"],
                evidence={"hour": hour},
            )
        if hour >= thresholds.late_night_start_hour or hour < thresholds.late_night_end_hour:
            return self._triggered(
                points=thresholds.late_night_points,
                reasons=["Transaction during late night hours (10pm-1am)"],
                evidence={"hour": hour},
            )
        return self._not_triggered({"hour": hour})
