"""Abstract base class for fraud scoring rules."""

from abc import ABC, abstractmethod
from decimal import Decimal

from ..config import FraudConfig
from ..models import RiskCategory, RiskContext, RuleResult

ZERO = Decimal("0")


def safe_decimal(value: Decimal | None) -> Decimal | None:
    """Drop values that are missing or not finite."""
    if value is None or not value.is_finite():
        return None
    return value


def safe_amount(context: RiskContext) -> Decimal:
    """Transaction amount for amount-based checks; negative or non-finite counts as zero."""
    amount = safe_decimal(context.amount)
    if amount is None or amount < ZERO:
        return ZERO
    return amount


def ghs(value: Decimal) -> str:
    return f"GHS {value:,.2f}"


class FraudRule(ABC):
    """Base class for all scoring rules.

    A rule owns exactly one category and returns that category's final
    contribution. Rules are pure: they only read the context and config.
    """

    rule_id: str
    category: RiskCategory

    @abstractmethod
    def evaluate(self, context: RiskContext, config: FraudConfig) -> RuleResult:
        """Evaluate this rule and return a RuleResult."""
        ...

    def _not_triggered(self, evidence: dict | None = None) -> RuleResult:
        """Convenience: return a zero-contribution result for this rule."""
        return RuleResult(
            rule_name=self.rule_id,
            category=self.category,
            points=0,
            evidence=evidence or {},
        )

    def _triggered(
        self,
        points: int,
        reasons: list[str],
        evidence: dict | None = None,
    ) -> RuleResult:
        """Convenience: return a result carrying points and display reasons."""
        if points == 0:
            return self._not_triggered(evidence)
        return RuleResult(
            rule_name=self.rule_id,
            category=self.category,
            points=points,
            reasons=reasons,
            evidence=evidence or {},
        )
