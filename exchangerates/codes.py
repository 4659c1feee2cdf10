"""Currency codes and lookups for supported global and crypto currencies."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


class UnsupportedCurrencyError(ValueError):
    """Raised when a currency code is unknown or not supported."""


@dataclass(frozen=True)
class CurrencyCode:
    """An ISO-like currency code such as ``USD`` or ``WBTC``."""

    code: str

    def __str__(self) -> str:
        return self.code

    def from_to(self, other: CurrencyCode) -> str:
        """Return the pair label ``"<self>-><other>"``."""
        return f"{self.code}->{other.code}"


BEER = CurrencyCode("BEER")
FLOKI = CurrencyCode("FLOKI")
GATE = CurrencyCode("GATE")
USDT = CurrencyCode("USDT")
WBTC = CurrencyCode("WBTC")

CRYPTO_CURRENCY_CODES: Mapping[str, CurrencyCode] = MappingProxyType(
    {c.code: c for c in (BEER, FLOKI, GATE, USDT, WBTC)}
)

_GLOBAL_CODES = """
AED AFN ALL AMD ANG AOA ARS AUD AWG AZN BAM BBD BDT BGN BHD BIF BMD BND BOB
BRL BSD BTC BTN BWP BYN BZD CAD CDF CHF CLF CLP CNH CNY COP CRC CUC CUP CVE
CZK DJF DKK DOP DZD EGP ERN ETB EUR FJD FKP GBP GEL GGP GHS GIP GMD GNF GTQ
GYD HKD HNL HRK HTG HUF IDR ILS IMP INR IQD IRR ISK JEP JMD JOD JPY KES KGS
KHR KMF KPW KRW KWD KYD KZT LAK LBP LKR LRD LSL LYD MAD MDL MGA MKD MMK MNT
MOP MRU MUR MVR MWK MXN MYR MZN NAD NGN NIO NOK NPR NZD OMR PAB PEN PGK PHP
PKR PLN PYG QAR RON RSD RUB RWF SAR SBD SCR SDG SEK SGD SHP SLL SOS SRD SSP
STD STN SVC SYP SZL THB TJS TMT TND TOP TRY TTD TWD TZS UAH UGX USD UYU UZS
VES VND VUV WST XAF XAG XAU XCD XDR XOF XPD XPF XPT YER ZAR ZMW ZWL
""".split()

GLOBAL_CURRENCY_CODES: Mapping[str, CurrencyCode] = MappingProxyType(
    {code: CurrencyCode(code) for code in _GLOBAL_CODES}
)

USD = GLOBAL_CURRENCY_CODES["USD"]
EUR = GLOBAL_CURRENCY_CODES["EUR"]
PLN = GLOBAL_CURRENCY_CODES["PLN"]


def crypto_currency_code(code: str) -> CurrencyCode:
    """Look up a supported crypto currency code."""
    try:
        return CRYPTO_CURRENCY_CODES[code]
    except KeyError:
        raise UnsupportedCurrencyError(
            f"invalid or unsupported crypto currency code: {code}"
        ) from None


def global_currency_code(code: str) -> CurrencyCode:
    """Look up a supported global (fiat and similar) currency code."""
    try:
        return GLOBAL_CURRENCY_CODES[code]
    except KeyError:
        raise UnsupportedCurrencyError(
            f"invalid or unsupported global currency code: {code}"
        ) from None