"""Integration tests for PayoutClient against the mock gateway"""

import dataclasses
import json
from decimal import Decimal

import httpx
import pytest

from one_two_pay.domain.banks import Bank
from one_two_pay.domain.exceptions import (
    GatewayError,
    MalformedResponseError,
    Ref1LengthError,
    TransportError,
)
from one_two_pay.domain.models import QueryReq, TransferReq
from one_two_pay.domain.status import ApiError
from one_two_pay.infrastructure.clients.payout import PayoutClient


async def test_transfer_then_query(payout_client: PayoutClient, transfer_request: TransferReq):
    """A payout can be looked up by its ref1 afterwards"""
    req = dataclasses.replace(transfer_request, ref1="it-transfer-1", amount=Decimal("99999.99"), ref2="note")

    transfer = await payout_client.transfer(req)
    assert transfer.payout_ref
    assert transfer.transaction_date_time.utcoffset() is not None

    status = await payout_client.query(QueryReq(ref1="it-transfer-1"))
    assert status.status == ApiError(1000)
    assert status.bank == Bank.KASIKORN
    assert status.amount == Decimal("99999.99")
    assert status.ref2 == "note"
    assert status.ref3 is None
    assert status.transfer_transaction_id == transfer.payout_ref


async def test_query_seeded_transaction(payout_client: PayoutClient):
    result = await payout_client.query(QueryReq(ref1="202205170841"))
    assert result.accname == "MANOP DEVELOPER"
    assert result.ref2 == "KASiKORN BANK"


async def test_duplicate_transfer(payout_client: PayoutClient, transfer_request: TransferReq):
    req = dataclasses.replace(transfer_request, ref1="it-duplicate")
    await payout_client.transfer(req)

    with pytest.raises(GatewayError) as exc_info:
        await payout_client.transfer(req)
    assert exc_info.value.api_error == ApiError(-1003)


async def test_amount_over_limit(payout_client: PayoutClient, transfer_request: TransferReq):
    req = dataclasses.replace(transfer_request, ref1="it-large", amount=Decimal("150000"))

    with pytest.raises(GatewayError) as exc_info:
        await payout_client.transfer(req)
    assert exc_info.value.code == -2000


async def test_query_unknown_ref1(payout_client: PayoutClient):
    with pytest.raises(GatewayError) as exc_info:
        await payout_client.query(QueryReq(ref1="never-sent"))
    assert exc_info.value.code == -1001


async def test_missing_authorization(payout_client: PayoutClient, transfer_request: TransferReq):
    payout_client.api_key = ""

    with pytest.raises(GatewayError) as exc_info:
        await payout_client.transfer(dataclasses.replace(transfer_request, ref1="it-noauth"))
    assert exc_info.value.code == -1002


async def test_invalid_ref1_never_sent(transfer_request: TransferReq):
    """Validation fails before any request leaves the client"""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={})

    client = PayoutClient(base_url="http://gateway.test", transport=httpx.MockTransport(handler))
    with pytest.raises(Ref1LengthError):
        await client.transfer(dataclasses.replace(transfer_request, ref1="x" * 31))
    assert calls == []


async def test_request_headers_and_body(transfer_request: TransferReq, transfer_success: dict):
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["headers"] = request.headers
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json=transfer_success)

    client = PayoutClient(
        base_url="https://payout.example.com/",
        api_key="secret",
        partner_code="P01",
        channel="WEB",
        transport=httpx.MockTransport(handler),
    )
    await client.transfer(transfer_request)

    assert captured["url"] == "https://payout.example.com/payout"
    assert captured["headers"]["Authorization"] == "secret"
    assert json.loads(captured["headers"]["type"]) == {"Channel": "WEB", "Partnercode": "P01"}
    assert captured["body"]["bankcode"] == "004"
    assert "ref2" not in captured["body"]


async def test_success_missing_field_surfaces(transfer_request: TransferReq, transfer_success: dict):
    del transfer_success["qrstring"]
    client = PayoutClient(
        base_url="http://gateway.test",
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json=transfer_success)),
    )

    with pytest.raises(MalformedResponseError):
        await client.transfer(transfer_request)


async def test_http_error_page_wrapped(transfer_request: TransferReq):
    """An HTTP error with an HTML page is a transport failure"""
    client = PayoutClient(
        base_url="http://gateway.test",
        transport=httpx.MockTransport(lambda request: httpx.Response(502, text="Bad Gateway")),
    )

    with pytest.raises(TransportError, match="HTTP 502") as exc_info:
        await client.transfer(transfer_request)
    assert isinstance(exc_info.value.__cause__, ValueError)


async def test_http_error_with_status_body_reaches_caller():
    """A JSON status body is a gateway answer whatever the HTTP status"""
    client = PayoutClient(
        base_url="http://gateway.test",
        transport=httpx.MockTransport(
            lambda request: httpx.Response(401, json={"status": "-1002", "message": "Invalid Authorization"})
        ),
    )

    with pytest.raises(GatewayError) as exc_info:
        await client.query(QueryReq(ref1="abc"))
    assert exc_info.value.api_error == ApiError(-1002)


async def test_transfer_http_error_with_status_body(transfer_request: TransferReq):
    client = PayoutClient(
        base_url="http://gateway.test",
        transport=httpx.MockTransport(
            lambda request: httpx.Response(500, json={"status": 9001, "message": "Service unavailable"})
        ),
    )

    with pytest.raises(GatewayError) as exc_info:
        await client.transfer(transfer_request)
    assert exc_info.value.code == 9001


async def test_non_json_body_wrapped():
    client = PayoutClient(
        base_url="http://gateway.test",
        transport=httpx.MockTransport(lambda request: httpx.Response(200, text="<html>maintenance</html>")),
    )

    with pytest.raises(TransportError) as exc_info:
        await client.query(QueryReq(ref1="abc"))
    assert isinstance(exc_info.value.__cause__, ValueError)


async def test_connection_error_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = PayoutClient(base_url="http://gateway.test", transport=httpx.MockTransport(handler))

    with pytest.raises(TransportError) as exc_info:
        await client.query(QueryReq(ref1="abc"))
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


async def test_timeout_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("too slow", request=request)

    client = PayoutClient(base_url="http://gateway.test", timeout=1.0, transport=httpx.MockTransport(handler))

    with pytest.raises(TransportError, match="timeout after 1.0s"):
        await client.query(QueryReq(ref1="abc"))
