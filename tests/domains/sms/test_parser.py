"""Unit tests for the SMS parser and its validation."""

from datetime import date, datetime, time
from decimal import Decimal

import pytest

from src.domains.sms import is_momo_message, parse, parse_many, validate
from src.domains.sms.models import Counterparty, ParsedTransaction, Provider, TransactionType

BASE_FIELDS = {
    "provider": Provider.MTN,
    "amount": Decimal("10.00"),
    "transaction_date": date(2024, 1, 12),
    "time_24h": time(14, 30),
}


class TestParseExamples:
    def test_mtn_received(self, mtn_received_sms):
        txn = parse(mtn_received_sms)
        assert txn.provider == Provider.MTN
        assert txn.transaction_type == TransactionType.RECEIVED
        assert txn.amount == Decimal("200.00")
        assert txn.sender_number == "0551234567"
        assert txn.sender_name == "John Doe"
        assert txn.balance == Decimal("2450.50")
        assert txn.transaction_date == date(2024, 1, 12)
        assert txn.time == "2:30 PM"
        assert txn.time_24h == time(14, 30)
        assert txn.is_valid
        assert txn.parse_errors == []

    def test_unrecognised_message(self):
        txn = parse("Vodafone Cash: transaction processed")
        assert not txn.is_valid
        assert "Amount not found" in txn.parse_errors
        assert "Transaction type not detected" in txn.parse_errors
        assert txn.provider == Provider.VODAFONE

    def test_vodafone_sent(self, vodafone_sent_sms):
        txn = parse(vodafone_sent_sms)
        assert txn.transaction_type == TransactionType.SENT
        assert txn.amount == Decimal("150.00")
        assert txn.fee == Decimal("1.50")
        assert txn.balance == Decimal("820.40")
        assert txn.receiver_name == "Kofi Boateng"
        assert txn.receiver_number == "0201234567"
        assert txn.reference_id == "58311204961"
        assert txn.time_24h == time(9, 15)
        assert txn.is_valid

    def test_cash_out(self, mtn_cash_out_sms):
        txn = parse(mtn_cash_out_sms)
        assert txn.transaction_type == TransactionType.CASH_OUT
        assert txn.merchant_name == "Kwik Mart"
        assert txn.amount == Decimal("300.00")
        assert txn.balance == Decimal("120.00")
        assert txn.fee == Decimal("3.00")
        assert txn.reference_id == "40012345678"
        assert txn.is_valid

    def test_airteltigo_received(self, airteltigo_received_sms):
        txn = parse(airteltigo_received_sms)
        assert txn.provider == Provider.AIRTELTIGO
        assert txn.amount == Decimal("1250.00")
        assert txn.balance == Decimal("1400.00")
        assert txn.sender_name == "Esi Addo"
        assert txn.occurred_at == datetime(2024, 2, 3, 23, 42)
        assert txn.is_valid

    def test_role_accessors_follow_type(self, mtn_received_sms):
        txn = parse(mtn_received_sms)
        assert txn.receiver_name is None
        assert txn.receiver_number is None
        assert txn.merchant_name is None

    def test_raw_message_kept(self, mtn_received_sms):
        assert parse(mtn_received_sms).raw_message == mtn_received_sms

    def test_empty_message_collects_every_error(self):
        txn = parse("")
        assert txn.parse_errors == [
            "Transaction type not detected",
            "Provider not detected",
            "Amount not found",
            "Transaction date not found",
            "Transaction time not found",
        ]


class TestParseProperties:
    def test_idempotent(self, mtn_received_sms, vodafone_sent_sms):
        for message in (mtn_received_sms, vodafone_sent_sms, "garbage"):
            assert parse(message) == parse(message)

    def test_valid_iff_no_errors(self, mtn_received_sms, mtn_cash_out_sms):
        for message in (mtn_received_sms, mtn_cash_out_sms, "MTN: sent GHS 5.00"):
            txn = parse(message)
            assert txn.is_valid == (txn.parse_errors == [])


class TestClockFallback:
    MESSAGE = "MTN MoMo: You have withdrawn GHS 100.00. Your balance is GHS 50.00."

    def test_missing_date_and_time_reported_without_clock(self):
        txn = parse(self.MESSAGE)
        assert "Transaction date not found" in txn.parse_errors
        assert "Transaction time not found" in txn.parse_errors
        assert not txn.is_valid

    def test_clock_fills_missing_fields(self):
        now = datetime(2024, 3, 5, 8, 7, 30, 999)
        txn = parse(self.MESSAGE, now=now)
        assert txn.transaction_date == date(2024, 3, 5)
        assert txn.time_24h == time(8, 7, 30)
        assert txn.time == "8:07 AM"
        assert txn.is_valid

    def test_clock_does_not_override_message_values(self, mtn_received_sms, now):
        txn = parse(mtn_received_sms, now=now)
        assert txn.transaction_date == date(2024, 1, 12)
        assert txn.time_24h == time(14, 30)


class TestValidationConsistency:
    @pytest.mark.parametrize(
        "transaction_type,counterparty",
        [
            (TransactionType.RECEIVED, Counterparty(name="Ama")),
            (TransactionType.RECEIVED, Counterparty(number="0241234567")),
            (TransactionType.SENT, Counterparty(name="Kofi")),
            (TransactionType.SENT, Counterparty(number="0201234567")),
            (TransactionType.CASH_OUT, Counterparty(name="Kwik Mart")),
            (TransactionType.WITHDRAWAL, Counterparty()),
            (TransactionType.AIRTIME, Counterparty()),
        ],
    )
    def test_complete_fields_are_valid(self, transaction_type, counterparty):
        assert validate(transaction_type, counterparty=counterparty, **BASE_FIELDS) == []

    @pytest.mark.parametrize(
        "transaction_type,counterparty",
        [
            (TransactionType.RECEIVED, Counterparty(name="Ama")),
            (TransactionType.SENT, Counterparty(name="Kofi")),
            (TransactionType.CASH_OUT, Counterparty(name="Kwik Mart")),
            (TransactionType.DEPOSIT, Counterparty()),
        ],
    )
    @pytest.mark.parametrize(
        "field,error",
        [
            ("provider", "Provider not detected"),
            ("amount", "Amount not found"),
            ("transaction_date", "Transaction date not found"),
            ("time_24h", "Transaction time not found"),
        ],
    )
    def test_single_omission(self, transaction_type, counterparty, field, error):
        fields = dict(BASE_FIELDS)
        fields[field] = Provider.UNKNOWN if field == "provider" else None
        errors = validate(transaction_type, counterparty=counterparty, **fields)
        assert errors == [error]

    @pytest.mark.parametrize(
        "transaction_type,error",
        [
            (TransactionType.RECEIVED, "Sender information missing"),
            (TransactionType.SENT, "Receiver information missing"),
            (TransactionType.CASH_OUT, "Merchant name missing"),
        ],
    )
    def test_missing_counterparty(self, transaction_type, error):
        errors = validate(transaction_type, counterparty=Counterparty(), **BASE_FIELDS)
        assert errors == [error]

    def test_cash_out_needs_a_name_not_a_number(self):
        errors = validate(
            TransactionType.CASH_OUT, counterparty=Counterparty(number="123456"), **BASE_FIELDS
        )
        assert errors == ["Merchant name missing"]

    def test_unknown_type(self):
        errors = validate(TransactionType.UNKNOWN, counterparty=Counterparty(), **BASE_FIELDS)
        assert errors == ["Transaction type not detected"]


class TestDerivedValidity:
    def test_caller_cannot_mark_empty_transaction_valid(self):
        txn = ParsedTransaction(is_valid=True)
        assert txn.is_valid is False
        assert "Amount not found" in txn.parse_errors

    def test_caller_errors_replaced_by_derived_errors(self):
        txn = ParsedTransaction(
            transaction_type=TransactionType.WITHDRAWAL,
            parse_errors=["made up"],
            **BASE_FIELDS,
        )
        assert txn.is_valid is True
        assert txn.parse_errors == []

    def test_missing_counterparty_invalidates(self):
        txn = ParsedTransaction(transaction_type=TransactionType.SENT, is_valid=True, **BASE_FIELDS)
        assert txn.is_valid is False
        assert txn.parse_errors == ["Receiver information missing"]

    def test_validated_from_json(self):
        txn = ParsedTransaction.model_validate({"provider": "MTN", "is_valid": True})
        assert txn.is_valid is False


class TestParseMany:
    def test_concatenated_notifications(self):
        text = (
            "MTN MoMo Payment received for GHS 50.00 from AMA SERWAA on 2024-01-12 at 10:00. "
            "Current Balance: GHS 60.00. "
            "Payment made for GHS 20.00 to KOFI MENSAH on 2024-01-12 at 10:05. "
            "Current Balance: GHS 40.00."
        )
        results = parse_many(text)
        assert len(results) == 2
        assert results[0].transaction_type == TransactionType.RECEIVED
        assert results[0].amount == Decimal("50.00")
        assert results[1].transaction_type == TransactionType.SENT
        assert results[1].amount == Decimal("20.00")
        assert results[1].receiver_name == "KOFI MENSAH"

    def test_single_message(self, mtn_received_sms):
        assert parse_many(mtn_received_sms) == [parse(mtn_received_sms)]


class TestIsMomoMessage:
    def test_known_provider(self, vodafone_sent_sms):
        assert is_momo_message(vodafone_sent_sms)

    def test_unrelated_text(self):
        assert not is_momo_message("Your OTP is 123456")
