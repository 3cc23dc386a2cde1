"""Validation of POST /payout replies"""

from typing import Any, Mapping, Union

import pydantic

from one_two_pay.domain.exceptions import (
    GatewayError,
    InvalidPayloadError,
    MissingFieldError,
    TimestampParseError,
)
from one_two_pay.domain.models import TransferRes
from one_two_pay.domain.status import ApiError
from one_two_pay.gateway.schemas import TransferResInner
from one_two_pay.utils.date_utils import TRANSFER_TIMESTAMP_FORMAT, parse_timestamp


def decode_transfer(document: Union[TransferResInner, Mapping[str, Any]]) -> TransferResInner:
    """
    Raises:
        InvalidPayloadError: If the document is not a transfer reply (e.g. non-integer status)
    """
    if isinstance(document, TransferResInner):
        return document
    try:
        return TransferResInner.model_validate(document)
    except pydantic.ValidationError as e:
        raise InvalidPayloadError(f"Invalid transfer response: {e}") from e


def validate_transfer(document: Union[TransferResInner, Mapping[str, Any]]) -> TransferRes:
    """
    Convert a payout reply into a TransferRes.

    A non-success status short-circuits: none of the success-only fields are
    looked at. On success all four of them must be present.

    Raises:
        GatewayError: Status is anything but 1000
        MissingFieldError: Success reply lacks payout_ref, transaction_id,
            transactionDate_time or qrstring
        TimestampParseError: transactionDate_time is not ISO-8601 with offset
    """
    inner = decode_transfer(document)

    api_error = ApiError(inner.status)
    if not api_error.is_success:
        raise GatewayError(api_error, inner.message)

    date_time_str = _require(inner.transaction_date_time, "transactionDate_time")
    payout_ref = _require(inner.payout_ref, "payout_ref")
    transaction_id = _require(inner.transaction_id, "transaction_id")
    qrstring = _require(inner.qrstring, "qrstring")

    try:
        transaction_date_time = parse_timestamp(date_time_str, TRANSFER_TIMESTAMP_FORMAT)
    except ValueError as e:
        raise TimestampParseError(date_time_str, str(e)) from e

    return TransferRes(
        payout_ref=payout_ref,
        transaction_id=transaction_id,
        transaction_date_time=transaction_date_time,
        qrstring=qrstring,
    )


def _require(value, field: str) -> str:
    if value is None:
        raise MissingFieldError(field)
    return value
