"""Account balance fraud rules."""

from src.domains.sms.models import TransactionType

from ..config import FraudConfig
from ..models import RiskCategory, RiskContext, RuleResult
from .base import FraudRule, ZERO, ghs, safe_amount, safe_decimal


class LowBalanceRule(FraudRule):
    """Low post-transaction balance, plus a sudden-drop check.

    The sudden-drop check compares the balance after the transaction with the
    balance expected before it (balance + amount for debits). It is skipped
    when that expected balance is not positive.
    """

    rule_id = "low_balance"
    category = RiskCategory.BALANCE

    def evaluate(self, context: RiskContext, config: FraudConfig) -> RuleResult:
        balance = safe_decimal(context.balance)
        if balance is None:
            return self._not_triggered()

        thresholds = config.balance
        points = 0
        reasons: list[str] = []

        if balance < thresholds.critical_max:
            points = thresholds.critical_points
            reasons.append(f"Account balance critically low (<{ghs(thresholds.critical_max)})")
        elif balance < thresholds.low_max:
            points = thresholds.low_points
            reasons.append(f"Account balance very low (<{ghs(thresholds.low_max)})")

        is_credit = context.transaction_type == TransactionType.RECEIVED
        debit = ZERO if is_credit else safe_amount(context)
        expected = balance + debit
        if expected > ZERO and balance < expected * thresholds.sudden_drop_ratio:
            points = max(points, thresholds.sudden_drop_points)
            reasons.append("Sudden significant drop in account balance")

        return self._triggered(
            points=points,
            reasons=reasons,
            evidence={"balance": str(balance), "expected_balance": str(expected)},
        )
