"""Fraud scoring configuration with sensible defaults."""

import os
from dataclasses import dataclass, field
from decimal import Decimal


@dataclass
class TimeThresholds:
    early_morning_hours: tuple[int, int] = (2, 5)
    early_morning_points: int = 40
    late_night_start_hour: int = 22
    late_night_end_hour: int = 1
    late_night_points: int = 20


@dataclass
class AmountThresholds:
    very_large_min: Decimal = Decimal("5000")
    very_large_points: int = 50
    large_min: Decimal = Decimal("1000")
    large_points: int = 30
    average_multiplier: Decimal = Decimal("3")
    average_points: int = 25
    small_max: Decimal = Decimal("10")


@dataclass
class DailyLimitSettings:
    exceeded_points: int = 25
    default_limit: Decimal = Decimal("2000")


@dataclass
class VelocityThresholds:
    count_1h_min: int = 3
    count_1h_points: int = 20
    count_3h_min: int = 5
    count_3h_points: int = 30
    count_24h_min: int = 10
    count_24h_points: int = 40


@dataclass
class MerchantScores:
    blocked_points: int = 50
    blacklisted_points: int = 60
    trusted_points: int = -10


@dataclass
class PatternThresholds:
    round_amounts: tuple[Decimal, ...] = tuple(
        Decimal(v) for v in ("100", "500", "1000", "2000", "5000", "10000")
    )
    round_amount_points: int = 15


@dataclass
class BalanceThresholds:
    critical_max: Decimal = Decimal("10")
    critical_points: int = 30
    low_max: Decimal = Decimal("50")
    low_points: int = 20
    sudden_drop_ratio: Decimal = Decimal("0.5")
    sudden_drop_points: int = 15


@dataclass
class LevelThresholds:
    critical: int = 80
    high: int = 60
    medium: int = 40


@dataclass
class FraudConfig:
    time: TimeThresholds = field(default_factory=TimeThresholds)
    amount: AmountThresholds = field(default_factory=AmountThresholds)
    daily_limit: DailyLimitSettings = field(default_factory=DailyLimitSettings)
    velocity: VelocityThresholds = field(default_factory=VelocityThresholds)
    merchant: MerchantScores = field(default_factory=MerchantScores)
    patterns: PatternThresholds = field(default_factory=PatternThresholds)
    balance: BalanceThresholds = field(default_factory=BalanceThresholds)
    levels: LevelThresholds = field(default_factory=LevelThresholds)

    @classmethod
    def from_env(cls) -> "FraudConfig":
        """Load config with env var overrides. Env vars use FRAUD_ prefix."""
        config = cls()

        # Amount overrides
        if v := os.getenv("FRAUD_LARGE_AMOUNT_MIN"):
            config.amount.large_min = Decimal(v)
        if v := os.getenv("FRAUD_VERY_LARGE_AMOUNT_MIN"):
            config.amount.very_large_min = Decimal(v)
        if v := os.getenv("FRAUD_AVERAGE_MULTIPLIER"):
            config.amount.average_multiplier = Decimal(v)

        # Velocity overrides
        if v := os.getenv("FRAUD_COUNT_1H_MIN"):
            config.velocity.count_1h_min = int(v)
        if v := os.getenv("FRAUD_COUNT_3H_MIN"):
            config.velocity.count_3h_min = int(v)
        if v := os.getenv("FRAUD_COUNT_24H_MIN"):
            config.velocity.count_24h_min = int(v)

        if v := os.getenv("FRAUD_DEFAULT_DAILY_LIMIT"):
            config.daily_limit.default_limit = Decimal(v)

        # Level overrides
        if v := os.getenv("FRAUD_HIGH_THRESHOLD"):
            config.levels.high = int(v)
        if v := os.getenv("FRAUD_CRITICAL_THRESHOLD"):
            config.levels.critical = int(v)

        return config


# Module-level default instance
default_config = FraudConfig()
