"""Domain models - immutable values handed to and returned from the client"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from one_two_pay.domain.banks import Bank
from one_two_pay.domain.status import ApiError


@dataclass(frozen=True)
class TransferReq:
    """Payout to a bank account"""

    bankacc: str  # e.g. "0652078409"
    bank: Bank
    accname: str  # account holder, e.g. "Manop Tangngam"
    amount: Decimal  # THB, e.g. Decimal("1000.50")
    mobileno: str  # Thai local format, e.g. "0805933181"
    transaction_by: str  # party making the transaction
    ref1: str  # external id, 1-30 chars
    ref2: Optional[str] = None
    ref3: Optional[str] = None
    ref4: Optional[str] = None
    line_token: Optional[str] = None  # passed through as-is
    email: Optional[str] = None  # passed through as-is


@dataclass(frozen=True)
class TransferRes:
    """Accepted payout"""

    payout_ref: str
    transaction_id: str
    transaction_date_time: datetime
    qrstring: str


@dataclass(frozen=True)
class QueryReq:
    """Status inquiry for a payout, keyed by the ref1 it was submitted with"""

    ref1: str


@dataclass(frozen=True)
class QueryRes:
    """Payout state reported by the gateway"""

    status: ApiError
    accname: str
    bankacc: str
    bank: Bank
    amount: Decimal
    ref1: str
    ref2: Optional[str]
    ref3: Optional[str]
    ref4: Optional[str]
    created_date: datetime
    transfer_date: datetime
    transfer_transaction_id: str
