"""Rule-based fraud scoring engine with additive category contributions."""

import structlog

from src.domains.sms.models import ParsedTransaction

from .config import FraudConfig, default_config
from .models import RiskCategory, RiskContext, RiskLevel, RiskResult, RuleResult
from .rules import ALL_RULES, FraudRule

logger = structlog.get_logger()

SCORE_MIN = 0
SCORE_MAX = 100


def classify_risk_level(score: int, config: FraudConfig | None = None) -> RiskLevel:
    levels = (config or default_config).levels
    if score >= levels.critical:
        return RiskLevel.CRITICAL
    if score >= levels.high:
        return RiskLevel.HIGH
    if score >= levels.medium:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


class RulesEngine:
    """Evaluates a transaction against the fixed rule table.

    Scoring is additive on a 0-100 scale:
    1. Run every rule -> one RuleResult per category
    2. Sum the category contributions (trust discounts are negative)
    3. Clamp the total to [0, 100]
    4. Level = step function of the clamped score
    """

    def __init__(
        self,
        config: FraudConfig | None = None,
        rules: list[FraudRule] | None = None,
    ) -> None:
        self._rules = list(ALL_RULES if rules is None else rules)
        self._config = config or default_config

    @property
    def rules(self) -> list[FraudRule]:
        return list(self._rules)

    def evaluate_rules(
        self, context: RiskContext, config: FraudConfig | None = None
    ) -> list[RuleResult]:
        """Run all rules; a failing rule contributes zero instead of aborting the score."""
        cfg = config or self._config
        results: list[RuleResult] = []
        for rule in self._rules:
            try:
                results.append(rule.evaluate(context, cfg))
            except Exception:
                logger.exception("rule_evaluation_error", rule_id=rule.rule_id)
                results.append(
                    RuleResult(rule_name=rule.rule_id, category=rule.category, points=0)
                )
        return results

    def score(
        self,
        transaction: ParsedTransaction,
        context: RiskContext,
        config: FraudConfig | None = None,
    ) -> RiskResult:
        """Score a transaction. Missing transaction facts in `context` are filled from it."""
        cfg = config or self._config
        merged = context.with_transaction(transaction)
        results = self.evaluate_rules(merged, cfg)

        breakdown: dict[str, int] = {category.value: 0 for category in RiskCategory}
        reasons: list[str] = []
        for result in results:
            key = result.category.value
            breakdown[key] = breakdown.get(key, 0) + result.points
            if result.points != 0:
                reasons.extend(result.reasons)

        total = sum(breakdown.values())
        score = min(max(total, SCORE_MIN), SCORE_MAX)
        level = classify_risk_level(score, cfg)

        logger.info(
            "transaction_risk_scored",
            reference_id=transaction.reference_id,
            provider=transaction.provider.value,
            transaction_type=transaction.transaction_type.value,
            raw_total=total,
            score=score,
            risk_level=level.value,
            triggered=[r.rule_name for r in results if r.triggered],
        )

        return RiskResult(score=score, level=level, reasons=reasons, breakdown=breakdown)


_default_engine = RulesEngine()


def score(
    transaction: ParsedTransaction,
    context: RiskContext,
    config: FraudConfig | None = None,
) -> RiskResult:
    """Score with the shared default engine."""
    return _default_engine.score(transaction, context, config)
