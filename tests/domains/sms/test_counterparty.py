"""Unit tests for type-dependent counterparty extraction."""

import pytest

from src.domains.sms import parse
from src.domains.sms.extractors.counterparty import extract_counterparty
from src.domains.sms.models import TransactionType


class TestReceivedCounterparty:
    @pytest.mark.parametrize(
        "text,name,number",
        [
            (
                "You received GHS 200.00 from 0551234567 John Doe on 2024-01-12",
                "John Doe",
                "0551234567",
            ),
            (
                "You have received GHS 5.00 from 0261234567 - Esi Addo on 03-02-2024",
                "Esi Addo",
                "0261234567",
            ),
            (
                "You have received GHS 5.00 from Yaw Darko 0209876543 on 12/01/2024",
                "Yaw Darko",
                "0209876543",
            ),
            (
                "Payment received for GHS 50.00 from AMA SERWAA. Current Balance: GHS 60.00",
                "AMA SERWAA",
                None,
            ),
            ("You received GHS 5.00 from 0551234567.", None, "0551234567"),
        ],
    )
    def test_sender_layouts(self, text, name, number):
        counterparty = extract_counterparty(text, TransactionType.RECEIVED)
        assert counterparty.name == name
        assert counterparty.number == number


class TestSentCounterparty:
    @pytest.mark.parametrize(
        "text,name,number",
        [
            (
                "You have sent GHS 150.00 to Kofi Boateng 0201234567 on 12/01/2024",
                "Kofi Boateng",
                "0201234567",
            ),
            (
                "Transferred GHS 20.00 to 0201234567 Ama Mensah on 2024-01-12",
                "Ama Mensah",
                "0201234567",
            ),
            (
                "Payment made for GHS 50.00 to Ama Mensah. Current Balance: GHS 10.00",
                "Ama Mensah",
                None,
            ),
        ],
    )
    def test_receiver_layouts(self, text, name, number):
        counterparty = extract_counterparty(text, TransactionType.SENT)
        assert counterparty.name == name
        assert counterparty.number == number

    def test_missing_receiver(self):
        counterparty = extract_counterparty("You have sent GHS 50.00.", TransactionType.SENT)
        assert counterparty.is_empty


class TestMerchantCounterparty:
    def test_merchant_code_and_name(self):
        text = "Cash Out made for GHS 300.00 to 123456 - Kwik Mart on 2024-01-12 at 16:05."
        counterparty = extract_counterparty(text, TransactionType.CASH_OUT)
        assert counterparty.name == "Kwik Mart"
        assert counterparty.number == "123456"

    def test_name_before_balance_clause(self):
        text = "Cash out GHS 50.00 to Melcom Accra. Current Balance: GHS 10.00"
        counterparty = extract_counterparty(text, TransactionType.CASH_OUT)
        assert counterparty.name == "Melcom Accra"

    def test_made_for_without_merchant_code(self):
        text = (
            "MTN MoMo: Cash Out made for GHS 300.00 to Kwik Mart on 2024-01-12 at 16:05. "
            "Current Balance: GHS 120.00."
        )
        counterparty = extract_counterparty(text, TransactionType.CASH_OUT)
        assert counterparty.name == "Kwik Mart"
        assert counterparty.number is None

    def test_made_for_without_merchant_code_parses_valid(self):
        txn = parse(
            "MTN MoMo: Cash Out made for GHS 300.00 to Kwik Mart on 2024-01-12 at 16:05. "
            "Current Balance: GHS 120.00."
        )
        assert txn.merchant_name == "Kwik Mart"
        assert txn.is_valid
        assert txn.parse_errors == []

    def test_biller(self):
        text = "Bill payment of GHS 80.00 to DSTV Ghana on 2024-01-12 at 10:00."
        counterparty = extract_counterparty(text, TransactionType.BILL_PAYMENT)
        assert counterparty.name == "DSTV Ghana"


class TestTypesWithoutCounterparty:
    @pytest.mark.parametrize(
        "transaction_type",
        [TransactionType.WITHDRAWAL, TransactionType.DEPOSIT, TransactionType.UNKNOWN],
    )
    def test_always_empty(self, transaction_type):
        text = "You received GHS 200.00 from 0551234567 John Doe on 2024-01-12"
        assert extract_counterparty(text, transaction_type).is_empty
