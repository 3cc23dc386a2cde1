"""Pydantic schemas for the gateway wire documents"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TransferReqInner(BaseModel):
    """Body for POST /payout"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    bankacc: str
    bankcode: str = Field(..., min_length=3, max_length=3, description="Zero-padded bank code, e.g. 004")
    bankname: str = Field(..., description="Full legal name of the bank")
    accname: str
    amount: float = Field(..., description="Amount of THB, sent as a JSON number")
    mobileno: str
    transaction_by: str
    ref1: str
    ref2: Optional[str] = None
    ref3: Optional[str] = None
    ref4: Optional[str] = None
    line_token: Optional[str] = Field(None, alias="lineToken")
    email: Optional[str] = None


class QueryReqInner(BaseModel):
    """Body for POST /inquery-trans"""

    model_config = ConfigDict(frozen=True)

    ref1: str


class TransferResInner(BaseModel):
    """Reply to POST /payout; the four optional fields are only sent on success"""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    status: int
    message: str = ""
    payout_ref: Optional[str] = None
    transaction_id: Optional[str] = None
    transaction_date_time: Optional[str] = Field(None, alias="transactionDate_time")
    qrstring: Optional[str] = None


class QueryResInner(BaseModel):
    """Reply to POST /inquery-trans; everything but status and message may be missing"""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    status: str
    message: str = ""
    accname: Optional[str] = None
    bankacc: Optional[str] = None
    bankcode: Optional[str] = None
    amount: Optional[str] = None
    ref1: Optional[str] = None
    ref2: Optional[str] = None
    ref3: Optional[str] = None
    ref4: Optional[str] = None
    created_date: Optional[str] = None
    transfer_date: Optional[str] = None
    transfer_transaction_id: Optional[str] = Field(None, alias="transfer_transactionId")


def encode(document: BaseModel) -> dict:
    """Wire dict using gateway field names; absent optional fields are left out, not sent as null"""
    return document.model_dump(mode="json", by_alias=True, exclude_none=True)
