"""Synthetic mobile money SMS generator with fraud-signal injection."""

import random
from datetime import datetime, timedelta
from typing import Any

from .base import BaseGenerator
from .utils.distributions import hour_of_day, weighted_amount
from .utils.names import (
    BILLERS,
    random_full_name,
    random_merchant,
    random_merchant_code,
    random_phone,
)

# (provider, transaction_type) -> message template
TEMPLATES: dict[tuple[str, str], str] = {
    ("MTN", "received"): (
        "MTN MoMo: You received GHS {amount} from {number} {name} on {date} at {time}. "
        "New Balance: GHS {balance}. Transaction ID: {txid}."
    ),
    ("MTN", "cash_out"): (
        "MTN MoMo: Cash Out made for GHS {amount} to {merchant_code} - {name} on {date} "
        "at {time}. Current Balance: GHS {balance}. Fee charged: GHS {fee}. "
        "Transaction ID: {txid}."
    ),
    ("MTN", "airtime"): (
        "MTN MoMo: You have bought GHS {amount} airtime for {number} on {date} at {time}. "
        "Your new balance is GHS {balance}. Transaction ID: {txid}."
    ),
    ("MTN", "bill_payment"): (
        "MTN MoMo: Bill payment of GHS {amount} to {name} on {date} at {time}. "
        "Your balance is GHS {balance}. Transaction ID: {txid}."
    ),
    ("Vodafone", "sent"): (
        "Vodafone Cash: You have sent GHS {amount} to {name} {number} on {date} at {time}. "
        "Your Vodafone Cash balance is GHS {balance}. Ref: {txid}"
    ),
    ("Vodafone", "deposit"): (
        "Vodafone Cash: Cash In of GHS {amount} deposited to your wallet on {date} at {time}. "
        "Your balance is GHS {balance}. Transaction ID: {txid}."
    ),
    ("AirtelTigo", "received"): (
        "AirtelTigo Money: You have received GHS {amount} from {number} - {name} on {date} "
        "at {time}. Your balance is GHS {balance}. Transaction ID: {txid}."
    ),
    ("AirtelTigo", "withdrawal"): (
        "AirtelTigo Money: You have withdrawn GHS {amount} on {date} at {time}. "
        "Fee charged: GHS {fee}. Your balance is GHS {balance}. Transaction ID: {txid}."
    ),
    ("TelecelCash", "received"): (
        "Telecel Cash: You have received GHS {amount} from {name} {number} on {date} "
        "at {time}. Your Telecel Cash balance is GHS {balance}. Transaction ID: {txid}."
    ),
    ("TelecelCash", "sent"): (
        "Telecel Cash: Transferred GHS {amount} to {number} {name} on {date} at {time}. "
        "Fee was GHS {fee}. Your balance is GHS {balance}. Ref: {txid}"
    ),
}

DEFAULT_TEMPLATE_WEIGHTS: dict[str, float] = {
    "MTN/received": 0.18,
    "MTN/cash_out": 0.12,
    "MTN/airtime": 0.08,
    "MTN/bill_payment": 0.07,
    "Vodafone/sent": 0.12,
    "Vodafone/deposit": 0.06,
    "AirtelTigo/received": 0.10,
    "AirtelTigo/withdrawal": 0.07,
    "TelecelCash/received": 0.10,
    "TelecelCash/sent": 0.10,
}

COMMON_AMOUNTS = [5.0, 10.0, 20.0, 50.0, 100.0, 200.0, 500.0]

DATE_FORMATS = ["%Y-%m-%d", "%d/%m/%Y", "%d-%m-%Y"]


class SmsGenerator(BaseGenerator):
    """Renders provider-style SMS with the ground truth alongside each message.

    Fraud signals are injected through config rates: `late_night_rate`,
    `large_amount_rate`, `suspicious_merchant_rate` and `low_balance_rate`.
    """

    def generate(self, num_messages: int = 100) -> list[dict[str, Any]]:
        records: list[dict[str, Any]] = []
        config = self.config

        start = datetime.fromisoformat(config.get("start_date", "2024-01-01"))
        end = start + timedelta(days=config.get("time_span_days", 30))
        weights = config.get("template_weights", DEFAULT_TEMPLATE_WEIGHTS)
        amount_dist = config.get(
            "amount_distribution",
            {"common_prob": 0.4, "log_normal_mean": 4.0, "log_normal_std": 1.1},
        )

        for _ in range(num_messages):
            provider, txn_type = self._weighted_choice(weights).split("/")

            occurred_at = self._random_datetime(start, end).replace(
                hour=hour_of_day(config.get("late_night_rate", 0.05)),
                second=0,
                microsecond=0,
            )

            amount = weighted_amount(
                COMMON_AMOUNTS,
                amount_dist["common_prob"],
                amount_dist["log_normal_mean"],
                amount_dist["log_normal_std"],
            )
            if self._chance("large_amount_rate", 0.02):
                amount = round(random.uniform(1500, 9000), 2)

            if self._chance("low_balance_rate", 0.05):
                balance = round(random.uniform(0, 45), 2)
            else:
                balance = round(random.uniform(50, 5000), 2)

            name, number = self._counterparty(provider, txn_type)
            fee = round(max(amount * 0.01, 0.5), 2)

            message = TEMPLATES[(provider, txn_type)].format(
                amount=self._decimal_str(amount),
                balance=self._decimal_str(balance),
                fee=self._decimal_str(fee),
                name=name or "",
                number=number or "",
                merchant_code=random_merchant_code(),
                date=occurred_at.strftime(random.choice(DATE_FORMATS)),
                time=self._format_time(occurred_at),
                txid=self._reference_id(),
            )

            records.append(
                {
                    "message": message,
                    "provider": provider,
                    "transaction_type": txn_type,
                    "amount": f"{amount:.2f}",
                    "balance": f"{balance:.2f}",
                    "counterparty_name": name,
                    "counterparty_number": number,
                    "occurred_at": occurred_at.isoformat(),
                }
            )

        return records

    def _counterparty(self, provider: str, txn_type: str) -> tuple[str | None, str | None]:
        if txn_type in ("received", "sent"):
            return random_full_name(), random_phone(provider)
        if txn_type == "cash_out":
            return random_merchant(self.config.get("suspicious_merchant_rate", 0.02)), None
        if txn_type == "bill_payment":
            return random.choice(BILLERS), None
        if txn_type == "airtime":
            return None, random_phone(provider)
        return None, None

    @staticmethod
    def _format_time(value: datetime) -> str:
        if random.random() < 0.5:
            return value.strftime("%H:%M:%S")
        display_hour = value.hour % 12 or 12
        period = "PM" if value.hour >= 12 else "AM"
        return f"{display_hour}:{value.minute:02d} {period}"
