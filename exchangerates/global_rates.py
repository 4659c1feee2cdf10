"""Pairwise cross rates between rates quoted against one base currency."""

from __future__ import annotations

from typing import Protocol

from .values import Amount, CalculatedExchangeRate, ExchangeRate, GlobalCurrencyExchangeRate


class _GlobalArithmetic(Protocol):
    def cross_rate(
        self, first: ExchangeRate, second: ExchangeRate, amount: Amount
    ) -> ExchangeRate: ...


class GlobalExchangeRateService:
    """Computes exchange rates between every pair of given currencies."""

    def __init__(self, arithmetic: _GlobalArithmetic) -> None:
        if arithmetic is None:
            raise ValueError("global exchange arithmetic service is required")
        self._arithmetic = arithmetic
        self._amount = Amount(1)

    def calculate_exchange_rates(
        self, *rates: GlobalCurrencyExchangeRate
    ) -> list[CalculatedExchangeRate]:
        """Return both directions of every distinct currency pair."""
        if len(rates) < 2:
            raise ValueError(
                "invalid rates number: fewer than two rates are provided"
            )

        exchanges: list[CalculatedExchangeRate] = []
        seen: set[str] = set()
        for first in rates:
            for second in rates:
                if first == second:
                    continue
                if (
                    first.code.from_to(second.code) in seen
                    or second.code.from_to(first.code) in seen
                ):
                    continue

                rate1 = ExchangeRate(str(first.rate))
                rate2 = ExchangeRate(str(second.rate))
                forward = self._arithmetic.cross_rate(rate2, rate1, self._amount)
                backward = self._arithmetic.cross_rate(rate1, rate2, self._amount)

                pair = (
                    CalculatedExchangeRate(first.code, second.code, forward),
                    CalculatedExchangeRate(second.code, first.code, backward),
                )
                exchanges.extend(pair)
                seen.update(calculated.from_to() for calculated in pair)
        return exchanges