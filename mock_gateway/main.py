"""Mock 1-2-Pay gateway for local development and integration tests"""

import json
import secrets
from datetime import datetime, timedelta, timezone
from pathlib import Path

from fastapi import FastAPI, Header, Request

app = FastAPI(title="Mock 1-2-Pay Gateway", version="1.0.0")
DATA_DIR = Path(__file__).resolve().parent / "stub"
BANGKOK = timezone(timedelta(hours=7))

KNOWN_BANK_CODES = {"002", "004", "006", "011", "014", "022", "024", "025", "030", "033",
                    "034", "035", "066", "067", "069", "070", "071", "073", "098"}
INQUIRY_FIELDS = ("accname", "bankacc", "bankcode", "amount", "ref1", "ref2", "ref3", "ref4",
                  "created_date", "transfer_date", "transfer_transactionId")

# ref1 -> inquiry document
transactions = {
    txn["ref1"]: txn
    for txn in json.loads((DATA_DIR / "transactions.json").read_text())["transactions"]
}


def _failure(status: int, message: str) -> dict:
    return {"status": status, "message": message}


@app.get("/health")
def health(): return {"status": "ok"}


@app.post("/payout")
async def payout(request: Request, authorization: str = Header(default="")):
    if not authorization:
        return _failure(-1002, "Invalid Authorization")
    try:
        body = await request.json()
        amount = float(body["amount"])
        ref1 = body["ref1"]
        bankcode = body["bankcode"]
    except (ValueError, KeyError, TypeError):
        return _failure(-1001, "Invalid json request")
    if bankcode not in KNOWN_BANK_CODES:
        return _failure(5009, "Incorrect 'Account To' number. Please try again")
    if ref1 in transactions:
        return _failure(-1003, "Duplicate Transaction")
    if amount > 100_000:
        return _failure(-2000, "Amount over 100,000 THB waiting to transfer, manual transfer")

    now = datetime.now(BANGKOK)
    payout_ref = now.strftime("%Y%m%d") + secrets.token_urlsafe(12)[:17]
    transactions[ref1] = {
        "status": "1000",
        "message": "Success",
        "accname": body.get("accname", ""),
        "bankacc": body.get("bankacc", ""),
        "bankcode": bankcode,
        "amount": f"{amount:,.2f}",
        "ref1": ref1,
        "ref2": body.get("ref2", ""),
        "ref3": body.get("ref3", ""),
        "ref4": body.get("ref4", ""),
        "created_date": now.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3],
        "transfer_date": now.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3],
        "transfer_transactionId": payout_ref,
    }
    return {
        "status": 1000,
        "message": "Success",
        "payout_ref": payout_ref,
        "transaction_id": payout_ref,
        "transactionDate_time": now.isoformat(timespec="seconds"),
        "qrstring": f"004600060{payout_ref}5102TH9104{secrets.randbelow(10_000):04d}",
    }


@app.post("/inquery-trans")
async def inquery_trans(request: Request):
    body = await request.json()
    txn = transactions.get(body.get("ref1"))
    if txn is None:
        # The real gateway sends every key even when the lookup fails
        return {"status": "-1001", "message": "Invalid json request", **{field: "" for field in INQUIRY_FIELDS}}
    return txn
