"""SMS analysis pipeline: parse -> score -> alert."""

from datetime import UTC, datetime

import structlog

from src.domains.sms import parse

from .alerts import build_alert
from .config import FraudConfig, default_config
from .models import AnalysisResult, RiskContext
from .rules_engine import RulesEngine

logger = structlog.get_logger()


class SmsAnalyzer:
    """Orchestrates parsing and risk scoring for a single raw message."""

    def __init__(
        self,
        config: FraudConfig | None = None,
        engine: RulesEngine | None = None,
    ) -> None:
        self._config = config or default_config
        self._engine = engine or RulesEngine(config=self._config)

    def analyze(
        self,
        raw: str,
        context: RiskContext | None = None,
        now: datetime | None = None,
    ) -> AnalysisResult:
        """Parse `raw` and, if the parse is valid, score it against `context`.

        Invalid parses are returned unscored; their parse_errors explain why.
        `now` is only used as a fallback when the message carries no date or time.
        """
        transaction = parse(raw, now=now)

        if not transaction.is_valid:
            logger.info(
                "sms_analysis_skipped",
                provider=transaction.provider.value,
                transaction_type=transaction.transaction_type.value,
                parse_errors=transaction.parse_errors,
            )
            return AnalysisResult(transaction=transaction, analyzed_at=datetime.now(UTC))

        risk = self._engine.score(transaction, context or RiskContext(), self._config)
        alert = build_alert(risk)

        logger.info(
            "sms_analyzed",
            reference_id=transaction.reference_id,
            provider=transaction.provider.value,
            transaction_type=transaction.transaction_type.value,
            score=risk.score,
            risk_level=risk.level.value,
            alert=alert.should_alert,
        )

        return AnalysisResult(
            transaction=transaction,
            risk=risk,
            alert=alert,
            analyzed_at=datetime.now(UTC),
        )
