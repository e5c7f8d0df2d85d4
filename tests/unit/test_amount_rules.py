"""Unit tests for the amount rule."""

from decimal import Decimal

import pytest

from src.domains.fraud.config import FraudConfig
from src.domains.fraud.models import RiskCategory, RiskContext
from src.domains.fraud.rules.amount import LargeAmountRule

CONFIG = FraudConfig()


def _context(amount: str, average: str | None = None) -> RiskContext:
    return RiskContext(
        amount=Decimal(amount),
        user_average_amount=Decimal(average) if average is not None else None,
    )


class TestLargeAmountRule:
    rule = LargeAmountRule()

    def test_very_large(self):
        result = self.rule.evaluate(_context("6000"), CONFIG)
        assert result.points == 50
        assert result.category == RiskCategory.AMOUNT
        assert result.reasons == ["Very large transaction amount (>GHS 5,000.00)"]

    def test_large(self):
        result = self.rule.evaluate(_context("1500"), CONFIG)
        assert result.points == 30
        assert result.reasons == ["Large transaction amount (>GHS 1,000.00)"]

    @pytest.mark.parametrize("amount", ["1000", "5000"])
    def test_thresholds_are_exclusive(self, amount):
        expected = 0 if amount == "1000" else 30
        assert self.rule.evaluate(_context(amount), CONFIG).points == expected

    def test_above_user_average(self):
        result = self.rule.evaluate(_context("400", average="100"), CONFIG)
        assert result.points == 25
        assert result.reasons == ["Transaction amount is 3x user average (GHS 100.00)"]

    def test_average_escalates_with_max_not_sum(self):
        result = self.rule.evaluate(_context("1500", average="100"), CONFIG)
        assert result.points == 30
        assert len(result.reasons) == 2

    def test_exactly_three_times_average_does_not_fire(self):
        assert not self.rule.evaluate(_context("300", average="100"), CONFIG).triggered

    @pytest.mark.parametrize("average", [None, "0"])
    def test_average_unknown_or_zero(self, average):
        assert not self.rule.evaluate(_context("400", average=average), CONFIG).triggered

    def test_small_amount_forced_to_zero(self):
        # 5 is more than 3x the average, but small amounts never score
        result = self.rule.evaluate(_context("5", average="1"), CONFIG)
        assert result.points == 0
        assert result.reasons == []

    def test_negative_amount_treated_as_zero(self):
        assert not self.rule.evaluate(_context("-6000"), CONFIG).triggered

    def test_missing_amount(self):
        assert not self.rule.evaluate(RiskContext(), CONFIG).triggered
