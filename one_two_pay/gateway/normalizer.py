"""Build gateway request documents from domain requests"""

from one_two_pay.domain.banks import code_of, display_name_of
from one_two_pay.domain.exceptions import AmountNotFiniteError, Ref1LengthError
from one_two_pay.domain.models import QueryReq, TransferReq
from one_two_pay.gateway.schemas import QueryReqInner, TransferReqInner

REF1_MIN_LENGTH = 1
REF1_MAX_LENGTH = 30


def validate_ref1(ref1: str) -> None:
    """
    Check the external transaction id fits the gateway limits.

    Raises:
        Ref1LengthError: If ref1 is shorter than 1 or longer than 30 characters
    """
    if not REF1_MIN_LENGTH <= len(ref1) <= REF1_MAX_LENGTH:
        raise Ref1LengthError(ref1, REF1_MIN_LENGTH, REF1_MAX_LENGTH)


def normalize_transfer(req: TransferReq) -> TransferReqInner:
    """
    Turn a transfer request into the POST /payout body.

    The bank is sent twice: as its code zero-padded to 3 digits
    (KASIKORN -> "004") and as its full legal name.

    Raises:
        Ref1LengthError: Before anything is built, if ref1 is out of range
        AmountNotFiniteError: If amount is NaN or infinite
    """
    validate_ref1(req.ref1)
    if not req.amount.is_finite():
        raise AmountNotFiniteError(req.amount)

    return TransferReqInner(
        bankacc=req.bankacc,
        bankcode=f"{code_of(req.bank):03d}",
        bankname=display_name_of(req.bank),
        accname=req.accname,
        amount=float(req.amount),
        mobileno=req.mobileno,
        transaction_by=req.transaction_by,
        ref1=req.ref1,
        ref2=req.ref2,
        ref3=req.ref3,
        ref4=req.ref4,
        line_token=req.line_token,
        email=req.email,
    )


def normalize_query(req: QueryReq) -> QueryReqInner:
    return QueryReqInner(ref1=req.ref1)
