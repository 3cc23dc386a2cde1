"""Pytest fixtures for testing"""

from decimal import Decimal

import httpx
import pytest

from mock_gateway import main as mock_gateway
from one_two_pay.domain.banks import Bank
from one_two_pay.domain.models import TransferReq
from one_two_pay.infrastructure.clients.payout import PayoutClient


@pytest.fixture
def transfer_request() -> TransferReq:
    """Transfer request from the gateway documentation"""
    return TransferReq(
        bankacc="0652078409",
        bank=Bank.KASIKORN,
        accname="Manop Tangngam",
        amount=Decimal("1000.50"),
        mobileno="0805933181",
        transaction_by="Jack Developer",
        ref1="123456789012345678",
    )


@pytest.fixture
def transfer_success() -> dict:
    """Successful POST /payout reply"""
    return {
        "status": 1000,
        "message": "Success",
        "payout_ref": "2022030288DtbRwK0IKr536t4",
        "transaction_id": "2022030288DtbRwK0IKr536t4",
        "transactionDate_time": "2022-03-02T20:30:04+07:00",
        "qrstring": "00460006022030288DtbRwK0IKr536t45102TH91042337",
    }


@pytest.fixture
def query_success() -> dict:
    """Successful POST /inquery-trans reply"""
    return {
        "status": "1000",
        "message": "Success",
        "accname": "MANOP DEVELOPER",
        "bankacc": "6652078409",
        "bankcode": "004",
        "amount": "1.00",
        "ref1": "202205170841",
        "ref2": "KASiKORN BANK",
        "ref3": "",
        "ref4": "",
        "created_date": "2022-05-17 08:41:48.320",
        "transfer_date": "2022-05-17 08:41:50.447",
        "transfer_transactionId": "2022051790WiXyi9Lwu0iuHgT",
    }


@pytest.fixture
def gateway_transactions():
    """Mock gateway state, restored after each test"""
    snapshot = dict(mock_gateway.transactions)
    yield mock_gateway.transactions
    mock_gateway.transactions.clear()
    mock_gateway.transactions.update(snapshot)


@pytest.fixture
def payout_client(gateway_transactions) -> PayoutClient:
    """PayoutClient wired to the mock gateway app in-process"""
    return PayoutClient(
        base_url="http://gateway.test",
        api_key="test-api-key",
        partner_code="PARTNER01",
        channel="API",
        transport=httpx.ASGITransport(app=mock_gateway.app),
    )
