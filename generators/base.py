"""Base generator class with seeded RNG and shared sampling helpers."""

import random
from datetime import datetime, timedelta
from typing import Any


class BaseGenerator:
    """Holds the generator config; seeding happens once, here, via `random.seed`."""

    def __init__(self, config: dict[str, Any], seed: int = 42):
        self.config = config
        self.seed = seed
        random.seed(seed)

    def _chance(self, rate_key: str, default: float) -> bool:
        """True with the probability configured under `rate_key`."""
        return random.random() < self.config.get(rate_key, default)

    def _reference_id(self, digits: int = 11) -> str:
        return str(random.randint(10 ** (digits - 1), 10**digits - 1))

    def _random_datetime(self, start: datetime, end: datetime) -> datetime:
        span = max(1, int((end - start).total_seconds()))
        return start + timedelta(seconds=random.randint(0, span))

    @staticmethod
    def _decimal_str(value: float) -> str:
        """Format an amount the way provider SMS do: thousands separators, 2 decimals."""
        return f"{value:,.2f}"

    @staticmethod
    def _weighted_choice(options: dict[str, float]) -> str:
        keys, weights = zip(*options.items())
        return random.choices(keys, weights=weights, k=1)[0]
