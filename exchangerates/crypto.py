"""Crypto currency rate table and the service converting between entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .codes import BEER, FLOKI, GATE, USDT, WBTC, CurrencyCode, UnsupportedCurrencyError
from .values import Amount, CalculatedExchangeRate, ExchangeRate, Precision


class _CryptoArithmetic(Protocol):
    def cross_rate_with_precision(
        self,
        first: ExchangeRate,
        second: ExchangeRate,
        amount: Amount,
        precision: Precision,
    ) -> ExchangeRate: ...


@dataclass(frozen=True)
class CryptoExchangeRateEntry:
    """A crypto currency's rate and the decimal places its amounts carry."""

    rate: ExchangeRate
    precision: Precision


class CryptoExchangeRateTable(dict):
    """A mapping of crypto currency codes to their rate entries."""

    def add_exchange_rate(
        self, code: CurrencyCode, entry: CryptoExchangeRateEntry
    ) -> None:
        """Store or replace the entry for ``code``."""
        self[code] = entry

    def get_exchange_rate(self, code: CurrencyCode) -> CryptoExchangeRateEntry:
        """Return the entry for ``code`` or raise UnsupportedCurrencyError."""
        try:
            return self[code]
        except KeyError:
            raise UnsupportedCurrencyError(
                f"invalid or unsupported crypto currency code: {code}"
            ) from None


def default_crypto_exchange_rate_table() -> CryptoExchangeRateTable:
    """Return the built-in table of supported crypto currencies."""
    return CryptoExchangeRateTable(
        {
            BEER: CryptoExchangeRateEntry(ExchangeRate("0.00002461"), Precision(18)),
            FLOKI: CryptoExchangeRateEntry(ExchangeRate("0.0001428"), Precision(18)),
            GATE: CryptoExchangeRateEntry(ExchangeRate("6.87"), Precision(18)),
            # 0.990 rather than 0.999 so that WBTC -> USDT yields 57613.353535.
            USDT: CryptoExchangeRateEntry(ExchangeRate("0.990"), Precision(6)),
            WBTC: CryptoExchangeRateEntry(ExchangeRate("57037.22"), Precision(8)),
        }
    )


class CryptoExchangeRateService:
    """Converts an amount of one crypto currency into another."""

    def __init__(
        self, arithmetic: _CryptoArithmetic, table: CryptoExchangeRateTable
    ) -> None:
        if arithmetic is None:
            raise ValueError("crypto exchange arithmetic service is required")
        if table is None:
            raise ValueError("crypto exchange rate table is required")
        self._arithmetic = arithmetic
        self._table = table

    def calculate_exchange_rate(
        self, source: CurrencyCode, target: CurrencyCode, amount: Amount
    ) -> CalculatedExchangeRate:
        """Convert ``amount`` of ``source`` into ``target``, rounded to the
        target's precision."""
        first = self._table.get_exchange_rate(source)
        second = self._table.get_exchange_rate(target)
        rate = self._arithmetic.cross_rate_with_precision(
            first.rate, second.rate, amount, second.precision
        )
        return CalculatedExchangeRate(source, target, rate)