"""Statistical distribution helpers for realistic amounts and times."""

import random


def log_normal_sample(
    mean: float, std: float, min_val: float = 0.01, max_val: float | None = None
) -> float:
    value = random.lognormvariate(mean, std)
    value = max(value, min_val)
    if max_val is not None:
        value = min(value, max_val)
    return value


def weighted_amount(
    common_amounts: list[float], common_prob: float, random_mean: float, random_std: float
) -> float:
    """Either a popular round amount or a log-normal draw."""
    if random.random() < common_prob:
        return float(random.choice(common_amounts))
    return round(log_normal_sample(random_mean, random_std, min_val=1.0, max_val=20000.0), 2)


def hour_of_day(late_night_rate: float) -> int:
    """Mostly daytime hours; a late-night/early-morning hour with probability late_night_rate."""
    if random.random() < late_night_rate:
        return random.choice([22, 23, 0, 2, 3, 4])
    return random.randint(7, 21)
