"""1-2-Pay payout gateway HTTP client"""

import json
import logging
import time
from typing import Any, Dict, Optional

import httpx

from one_two_pay.config import settings
from one_two_pay.domain.exceptions import (
    GatewayError,
    MalformedResponseError,
    TransportError,
)
from one_two_pay.domain.models import QueryReq, QueryRes, TransferReq, TransferRes
from one_two_pay.gateway.normalizer import normalize_query, normalize_transfer
from one_two_pay.gateway.query import decode_query, validate_query
from one_two_pay.gateway.schemas import encode
from one_two_pay.gateway.transfer import decode_transfer, validate_transfer
from one_two_pay.infrastructure.observability.logging import log_query, log_transfer
from one_two_pay.infrastructure.observability.metrics import gateway_latency_histogram, record_exchange

logger = logging.getLogger(__name__)

PAYOUT_PATH = "/payout"
INQUIRY_PATH = "/inquery-trans"


class PayoutClient:
    """Client for the 1-2-Pay payout gateway"""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        partner_code: str | None = None,
        channel: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.api_key
        self.partner_code = partner_code if partner_code is not None else settings.partner_code
        self.channel = channel if channel is not None else settings.channel
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    def headers(self) -> Dict[str, str]:
        """Gateway credentials: channel and partner code travel JSON-encoded in the `type` header"""
        type_header = json.dumps({"Channel": self.channel, "Partnercode": self.partner_code})
        return {"type": type_header, "Authorization": self.api_key}

    async def transfer(self, req: TransferReq) -> TransferRes:
        """
        Pay out to a bank account.

        Raises:
            ValidationError: Request is rejected before anything is sent
            GatewayError: Gateway declined the payout
            MalformedResponseError: Success reply breaks the contract
            TransportError: On timeout, connection failure, or a non-JSON reply
        """
        body = encode(normalize_transfer(req))
        start_time = time.time()
        status_code: Optional[int] = None
        outcome = "transport_error"
        try:
            data = await self._post(PAYOUT_PATH, body)
            inner = decode_transfer(data)
            status_code = inner.status
            result = validate_transfer(inner)
            outcome = "success"
            return result
        except GatewayError:
            outcome = "gateway_error"
            raise
        except MalformedResponseError:
            outcome = "malformed"
            raise
        finally:
            record_exchange(PAYOUT_PATH, outcome, status_code)
            log_transfer(req.ref1, outcome, status_code, (time.time() - start_time) * 1000)

    async def query(self, req: QueryReq) -> QueryRes:
        """
        Look up the state of a payout by its ref1.

        Raises:
            GatewayError: Gateway answered with a non-success status
            MalformedResponseError: Success reply breaks the contract
            TransportError: On timeout, connection failure, or a non-JSON reply
        """
        body = encode(normalize_query(req))
        start_time = time.time()
        status_code: Optional[int] = None
        outcome = "transport_error"
        try:
            data = await self._post(INQUIRY_PATH, body)
            inner = decode_query(data)
            try:
                status_code = int(inner.status)
            except ValueError:
                status_code = None
            result = validate_query(inner)
            outcome = "success"
            return result
        except GatewayError:
            outcome = "gateway_error"
            raise
        except MalformedResponseError:
            outcome = "malformed"
            raise
        finally:
            record_exchange(INQUIRY_PATH, outcome, status_code)
            log_query(req.ref1, outcome, status_code, (time.time() - start_time) * 1000)

    async def _post(self, path: str, body: Dict[str, Any]) -> Any:
        logger.debug("Gateway request", extra={"path": path, "body": body})
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                with gateway_latency_histogram.labels(endpoint=path).time():
                    response = await client.post(
                        f"{self.base_url}{path}",
                        json=body,
                        headers=self.headers(),
                    )
            except httpx.TimeoutException as e:
                raise TransportError(f"Payout gateway timeout after {self.timeout}s") from e
            except httpx.RequestError as e:
                raise TransportError(f"Payout gateway unreachable: {e}") from e

        # Failures are reported in the JSON body, whatever the HTTP status
        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(
                f"Payout gateway returned non-JSON body (HTTP {response.status_code}): {e}"
            ) from e

        logger.debug("Gateway response", extra={"path": path, "body": data, "http_status": response.status_code})
        return data
