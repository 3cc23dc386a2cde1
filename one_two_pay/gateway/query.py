"""Validation of POST /inquery-trans replies"""

import re
from decimal import Decimal
from typing import Any, Mapping, Optional, Union

import pydantic

from one_two_pay.domain.banks import Bank, bank_of
from one_two_pay.domain.exceptions import (
    GatewayError,
    InvalidAmountError,
    InvalidBankCodeError,
    InvalidPayloadError,
    InvalidStatusError,
    MissingFieldError,
    TimestampParseError,
)
from one_two_pay.domain.models import QueryRes
from one_two_pay.domain.status import ApiError
from one_two_pay.gateway.schemas import QueryResInner
from one_two_pay.utils.date_utils import QUERY_TIMESTAMP_FORMAT, parse_timestamp

_STATUS = re.compile(r"[+-]?[0-9]+")
_AMOUNT = re.compile(r"[0-9]+(\.[0-9]+)?")

# Wire names that must be present on a success reply, in check order
REQUIRED_ON_SUCCESS = (
    "accname",
    "bankacc",
    "bankcode",
    "ref1",
    "ref2",
    "ref3",
    "ref4",
    "amount",
    "created_date",
    "transfer_date",
    "transfer_transactionId",
)


def decode_query(document: Union[QueryResInner, Mapping[str, Any]]) -> QueryResInner:
    """
    Raises:
        InvalidPayloadError: If the document has no status or is not an object
    """
    if isinstance(document, QueryResInner):
        return document
    try:
        return QueryResInner.model_validate(document)
    except pydantic.ValidationError as e:
        raise InvalidPayloadError(f"Invalid inquiry response: {e}") from e


def validate_query(document: Union[QueryResInner, Mapping[str, Any]]) -> QueryRes:
    """
    Convert an inquiry reply into a QueryRes.

    Every field is a string on the wire. Empty ref2-ref4 mean "no value";
    ref1 is kept as sent since it is the key the caller looked up.

    Raises:
        InvalidStatusError: status is not an integer
        GatewayError: status is anything but 1000
        MissingFieldError: a field required on success is absent
        InvalidBankCodeError / UnknownBankError: bankcode is not a supported bank
        InvalidAmountError: amount is not a number once commas are removed
        TimestampParseError: created_date or transfer_date is malformed
    """
    inner = decode_query(document)

    api_error = ApiError(_parse_status(inner.status))
    if not api_error.is_success:
        raise GatewayError(api_error, inner.message)

    fields = inner.model_dump(by_alias=True)
    for name in REQUIRED_ON_SUCCESS:
        if fields.get(name) is None:
            raise MissingFieldError(name)

    return QueryRes(
        status=api_error,
        accname=inner.accname,
        bankacc=inner.bankacc,
        bank=_parse_bank(inner.bankcode),
        amount=parse_amount(inner.amount),
        ref1=inner.ref1,
        ref2=_none_if_empty(inner.ref2),
        ref3=_none_if_empty(inner.ref3),
        ref4=_none_if_empty(inner.ref4),
        created_date=_parse_date(inner.created_date),
        transfer_date=_parse_date(inner.transfer_date),
        transfer_transaction_id=inner.transfer_transaction_id,
    )


def parse_amount(text: str) -> Decimal:
    """
    "100,001.00" -> Decimal("100001.00"); surrounding whitespace is ignored.

    Only ASCII digits with an optional fraction are accepted once commas are removed.

    Raises:
        InvalidAmountError: carrying the original text
    """
    digits = text.strip().replace(",", "")
    if not _AMOUNT.fullmatch(digits):
        raise InvalidAmountError(text)
    return Decimal(digits)


def _parse_status(text: str) -> int:
    stripped = text.strip()
    if not _STATUS.fullmatch(stripped):
        raise InvalidStatusError(text)
    return int(stripped)


def _parse_bank(text: str) -> Bank:
    stripped = text.strip()
    if not (stripped.isascii() and stripped.isdigit()):
        raise InvalidBankCodeError(text)
    return bank_of(int(stripped))


def _parse_date(text: str):
    try:
        return parse_timestamp(text, QUERY_TIMESTAMP_FORMAT)
    except ValueError as e:
        raise TimestampParseError(text, str(e)) from e


def _none_if_empty(value: str) -> Optional[str]:
    return value if value else None
