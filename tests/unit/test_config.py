"""Tests for application and scoring configuration."""

from decimal import Decimal

from src.config import Settings
from src.domains.fraud.config import FraudConfig


class TestSettings:
    def test_default_settings(self):
        settings = Settings()
        assert settings.app_name == "momo-sentinel"
        assert settings.app_version == "0.1.0"
        assert settings.port == 8000

    def test_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("MOMO_APP_NAME", "test-app")
        monkeypatch.setenv("MOMO_PORT", "9000")
        monkeypatch.setenv("MOMO_DEBUG", "true")
        settings = Settings()
        assert settings.app_name == "test-app"
        assert settings.port == 9000
        assert settings.debug is True

    def test_message_length_limit(self, monkeypatch):
        monkeypatch.setenv("MOMO_MAX_MESSAGE_LENGTH", "500")
        assert Settings().max_message_length == 500


class TestFraudConfig:
    def test_defaults_match_rule_table(self):
        config = FraudConfig()
        assert config.time.early_morning_points == 40
        assert config.time.late_night_points == 20
        assert config.amount.very_large_min == Decimal("5000")
        assert config.amount.large_min == Decimal("1000")
        assert config.amount.small_max == Decimal("10")
        assert config.daily_limit.default_limit == Decimal("2000")
        assert config.velocity.count_24h_points == 40
        assert config.merchant.blacklisted_points == 60
        assert config.merchant.trusted_points == -10
        assert Decimal("10000") in config.patterns.round_amounts
        assert config.balance.sudden_drop_ratio == Decimal("0.5")
        assert (config.levels.medium, config.levels.high, config.levels.critical) == (40, 60, 80)

    def test_from_env_overrides(self, monkeypatch):
        monkeypatch.setenv("FRAUD_LARGE_AMOUNT_MIN", "800")
        monkeypatch.setenv("FRAUD_COUNT_1H_MIN", "5")
        monkeypatch.setenv("FRAUD_DEFAULT_DAILY_LIMIT", "3500")
        monkeypatch.setenv("FRAUD_CRITICAL_THRESHOLD", "90")
        config = FraudConfig.from_env()
        assert config.amount.large_min == Decimal("800")
        assert config.velocity.count_1h_min == 5
        assert config.daily_limit.default_limit == Decimal("3500")
        assert config.levels.critical == 90

    def test_from_env_without_overrides(self, monkeypatch):
        monkeypatch.delenv("FRAUD_LARGE_AMOUNT_MIN", raising=False)
        assert FraudConfig.from_env().amount.large_min == Decimal("1000")

    def test_instances_do_not_share_state(self):
        first = FraudConfig()
        first.velocity.count_1h_min = 99
        assert FraudConfig().velocity.count_1h_min == 3
