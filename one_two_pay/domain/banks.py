"""Bank registry - the closed set of banks the gateway can pay out to"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from one_two_pay.domain.exceptions import UnknownBankAcronymError, UnknownBankError


class Bank(str, Enum):
    """Supported bank, valued by its canonical acronym"""

    BANGKOK = "BBL"
    KASIKORN = "KBANK"
    KRUNG_THAI = "KTB"
    TMB_THANACHART = "TTB"
    SIAM_COMMERCIAL = "SCB"
    AYUDHYA = "BAY"
    KIATNAKIN_PHATRA = "KKP"
    CIMB_THAI = "CIMBT"
    TISCO = "TISCO"
    UNITED_OVERSEAS = "UOBT"
    CREDIT_RETAIL = "TCD"
    LAND_AND_HOUSES = "LHFG"
    CHINA = "ICBCT"
    ENTERPRISE_DEVELOPMENT = "SME"
    AGRICULTURAL = "BAAC"
    EXPORT_IMPORT = "EXIM"
    GOVERNMENT_SAVINGS = "GSB"
    GOVERNMENT_HOUSING = "GHB"
    ISLAMIC = "ISBT"

    def __str__(self) -> str:
        return display_name_of(self)


@dataclass(frozen=True)
class BankInfo:
    code: int
    name: str


# Names are spelled exactly as the gateway expects them in `bankname`
_BANKS: Dict[Bank, BankInfo] = {
    Bank.BANGKOK: BankInfo(2, "BANGKOK BANK PUBLIC COMPANY LTD."),
    Bank.KASIKORN: BankInfo(4, "KASIKORNBANK PUBLIC COMPANY LIMITED"),
    Bank.KRUNG_THAI: BankInfo(6, "KRUNG THAI BANK PUBLIC COMPANY LTD."),
    Bank.TMB_THANACHART: BankInfo(11, "TMBTHANACHART BANK PUBLIC COMPANY LIMITED"),
    Bank.SIAM_COMMERCIAL: BankInfo(14, "SIAM COMMERCIAL BANK PUBLIC COMPANY LTD."),
    Bank.AYUDHYA: BankInfo(25, "BANK OF AYUDHYA PUBLIC COMPANY LTD."),
    Bank.KIATNAKIN_PHATRA: BankInfo(69, "KIATNAKIN PHATRA BANK PUBLIC COMPANY LIMITED"),
    Bank.CIMB_THAI: BankInfo(22, "CIMB THAI BANK PUBLIC COMPANY LIMITED"),
    Bank.TISCO: BankInfo(67, "TISCO BANK PUBLIC COMPANY LIMITED"),
    Bank.UNITED_OVERSEAS: BankInfo(24, "UNITED OVERSEAS BANK (THAI) PUBLIC COMPANY LIMITED"),
    Bank.CREDIT_RETAIL: BankInfo(71, "THE THAI CREDIT RETAIL BANK PUBLIC COMPANY LIMITED"),
    Bank.LAND_AND_HOUSES: BankInfo(73, "LAND AND HOUSES BANK PUBLIC COMPANY LMITED"),
    Bank.CHINA: BankInfo(70, "INDUSTRIAL AND COMMERCIAL BANK OF CHINA (THAI) PUBLIC COMPANY LIMITED"),
    Bank.ENTERPRISE_DEVELOPMENT: BankInfo(98, "SMALL AND MEDIUM ENTERPRISE DEVELOPMENT BANK OF THAILAND"),
    Bank.AGRICULTURAL: BankInfo(34, "BANK FOR AGRICULTURE AND AGRICULTURAL COOPERATIVES"),
    Bank.EXPORT_IMPORT: BankInfo(35, "EXPORT-IMPORT BANK OF THAILAND"),
    Bank.GOVERNMENT_SAVINGS: BankInfo(30, "GOVERNMENT SAVINGS BANK"),
    Bank.GOVERNMENT_HOUSING: BankInfo(33, "THE GOVERNMENT HOUSING BANK"),
    Bank.ISLAMIC: BankInfo(66, "ISLAMIC BANK OF THAILAND"),
}

# Reverse indexes, derived once so both directions come from the same table
_BY_CODE: Dict[int, Bank] = {info.code: bank for bank, info in _BANKS.items()}
_BY_ACRONYM: Dict[str, Bank] = {bank.value: bank for bank in Bank}

if len(_BANKS) != len(Bank) or len(_BY_CODE) != len(Bank):
    raise RuntimeError("Bank registry is not a bijection over Bank members")


def code_of(bank: Bank) -> int:
    """Numeric gateway code, e.g. 4 for KASIKORN"""
    return _BANKS[bank].code


def bank_of(code: int) -> Bank:
    """
    Resolve a numeric gateway code.

    Raises:
        UnknownBankError: If the code is not one of the supported banks
    """
    try:
        return _BY_CODE[code]
    except KeyError:
        raise UnknownBankError(code) from None


def acronym_of(bank: Bank) -> str:
    return bank.value


def bank_of_acronym(acronym: str) -> Bank:
    """
    Resolve an acronym such as "kbank" or "KBANK" (case-insensitive).

    Raises:
        UnknownBankAcronymError: If no supported bank has this acronym
    """
    try:
        return _BY_ACRONYM[acronym.upper()]
    except KeyError:
        raise UnknownBankAcronymError(acronym) from None


def display_name_of(bank: Bank) -> str:
    """Full legal name, sent to the gateway as `bankname`"""
    return _BANKS[bank].name
