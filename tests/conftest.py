"""Shared test fixtures for MoMo Sentinel tests."""

import os
from datetime import datetime

import pytest

os.environ.setdefault("MOMO_LOG_LEVEL", "WARNING")

MTN_RECEIVED_SMS = (
    "MTN MoMo: You received GHS 200.00 from 0551234567 John Doe on 2024-01-12 "
    "at 14:30:00. New Balance: GHS 2,450.50"
)

VODAFONE_SENT_SMS = (
    "Vodafone Cash: You have sent GHS 150.00 to Kofi Boateng 0201234567 on 12/01/2024 "
    "at 9:15 AM. Fee was GHS 1.50. Your Vodafone Cash balance is GHS 820.40. Ref: 58311204961"
)

MTN_CASH_OUT_SMS = (
    "MTN MoMo: Cash Out made for GHS 300.00 to 123456 - Kwik Mart on 2024-01-12 at 16:05. "
    "Current Balance: GHS 120.00. Fee charged: GHS 3.00. Transaction ID: 40012345678."
)

AIRTELTIGO_RECEIVED_SMS = (
    "AirtelTigo Money: You have received GHS 1,250.00 from 0261234567 - Esi Addo on "
    "03-02-2024 at 11:42 PM. Your balance is GHS 1,400.00. Transaction ID: 77120045561."
)

UNRECOGNISED_SMS = "Vodafone Cash: transaction processed"


@pytest.fixture
def mtn_received_sms() -> str:
    return MTN_RECEIVED_SMS


@pytest.fixture
def vodafone_sent_sms() -> str:
    return VODAFONE_SENT_SMS


@pytest.fixture
def mtn_cash_out_sms() -> str:
    return MTN_CASH_OUT_SMS


@pytest.fixture
def airteltigo_received_sms() -> str:
    return AIRTELTIGO_RECEIVED_SMS


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 1, 12, 15, 0, 0)
