"""Gateway status codes and their canonical descriptions"""

from dataclasses import dataclass
from typing import Dict

SUCCESS_CODE = 1000

_DESCRIPTIONS: Dict[int, str] = {
    1000: "Success",
    -2000: "Amount over 100,000 THB waiting to transfer, manual transfer",
    1899: "We cannot process this transaction at the moment (1899)",
    1999: "We cannot process this transaction at the moment (1999)",
    5009: "Incorrect 'Account To' number. Please try again",
    5016: "Please enter only Arabic numerals",
    6000: "Amount exceeds transfer limit for today. Please re-enter amount again.",
    9001: "This service is temporarily unavailable and will be back soon",
    9003: (
        "You are about to make a similar transfer-same amount, same recipient. "
        "Please check, you transaction details before proceeding further."
    ),
    -1001: "Invalid json request",
    -1002: "Invalid Authorization",
    -1003: "Duplicate Transaction",
    -1004: "Invalid payout config",
    -1009: "Balance is not enough",
    9091: "Request has no response from the bank. Please try again later.",
}


def describe(code: int) -> str:
    """Human-readable message for any status code, known or not"""
    return _DESCRIPTIONS.get(code, f"Unknown error with code {code}")


def is_success(code: int) -> bool:
    return code == SUCCESS_CODE


@dataclass(frozen=True, order=True)
class ApiError:
    """Status code reported by the gateway; 1000 is the only success"""

    code: int

    @property
    def is_success(self) -> bool:
        return is_success(self.code)

    @property
    def description(self) -> str:
        return describe(self.code)

    def __str__(self) -> str:
        return describe(self.code)
