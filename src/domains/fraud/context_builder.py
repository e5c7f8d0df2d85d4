"""Build a RiskContext from transaction history and user settings."""

from datetime import datetime, timedelta
from decimal import Decimal

import structlog
from pydantic import BaseModel, Field

from src.domains.sms.models import ParsedTransaction, TransactionType

from .blacklist import GLOBAL_BLACKLIST_MERCHANTS, average_amount, is_globally_blacklisted
from .config import FraudConfig, default_config
from .models import RiskContext

logger = structlog.get_logger()


class HistoricalTransaction(BaseModel):
    """A previously stored transaction, as supplied by the history store."""

    amount: Decimal
    transaction_type: TransactionType
    occurred_at: datetime


class UserRiskSettings(BaseModel):
    daily_limit: Decimal | None = None
    blocked_merchants: list[str] = Field(default_factory=list)
    trusted_merchants: list[str] = Field(default_factory=list)


class ContextBuilder:
    """Turns caller-fetched history into the velocity, spend and list signals.

    Windows are half-open: a transaction counts for a window when
    now - window < occurred_at <= now.
    """

    def __init__(
        self,
        config: FraudConfig | None = None,
        blacklist: tuple[str, ...] = GLOBAL_BLACKLIST_MERCHANTS,
    ) -> None:
        self._config = config or default_config
        self._blacklist = blacklist

    def build(
        self,
        transaction: ParsedTransaction,
        history: list[HistoricalTransaction],
        settings: UserRiskSettings | None = None,
        now: datetime | None = None,
    ) -> RiskContext:
        settings = settings or UserRiskSettings()
        now = now or transaction.occurred_at
        if now is None:
            # No clock to place the windows against
            logger.warning(
                "risk_context_without_clock", reference_id=transaction.reference_id
            )
            history = []

        last_1h = self._window(history, now, timedelta(hours=1))
        last_3h = self._window(history, now, timedelta(hours=3))
        last_24h = self._window(history, now, timedelta(hours=24))

        sent_24h = [t.amount for t in last_24h if t.transaction_type == TransactionType.SENT]
        daily_limit = settings.daily_limit
        if daily_limit is None:
            daily_limit = self._config.daily_limit.default_limit

        merchant = transaction.counterparty_name or transaction.counterparty_number
        context = RiskContext(
            user_average_amount=average_amount(sent_24h),
            daily_spent=sum(sent_24h, Decimal("0")),
            daily_limit=daily_limit,
            count_1h=len(last_1h),
            count_3h=len(last_3h),
            count_24h=len(last_24h),
            blocked_merchants=frozenset(settings.blocked_merchants),
            trusted_merchants=frozenset(settings.trusted_merchants),
            is_globally_blacklisted=is_globally_blacklisted(merchant, self._blacklist),
        )
        return context.with_transaction(transaction)

    @staticmethod
    def _window(
        history: list[HistoricalTransaction], now: datetime | None, span: timedelta
    ) -> list[HistoricalTransaction]:
        if now is None:
            return []
        start = now - span
        return [t for t in history if start < t.occurred_at <= now]


def build_risk_context(
    transaction: ParsedTransaction,
    history: list[HistoricalTransaction],
    settings: UserRiskSettings | None = None,
    now: datetime | None = None,
    blacklist: tuple[str, ...] = GLOBAL_BLACKLIST_MERCHANTS,
    config: FraudConfig | None = None,
) -> RiskContext:
    return ContextBuilder(config=config, blacklist=blacklist).build(
        transaction, history, settings=settings, now=now
    )
