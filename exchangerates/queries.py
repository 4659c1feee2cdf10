"""Query objects, their handlers and the application container."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from .codes import CurrencyCode, crypto_currency_code
from .values import Amount, CalculatedExchangeRate, GlobalCurrencyExchangeRate


@dataclass(frozen=True)
class GlobalExchangeRatesQuery:
    """A request for rates between the given comma separated currencies."""

    currencies: str
    base: str

    def __post_init__(self) -> None:
        if not self.base:
            raise ValueError("invalid base: must be a non empty string")
        if not self.currencies:
            raise ValueError("invalid currencies: must be a non empty string")


@dataclass(frozen=True)
class CryptoExchangeRateQuery:
    """A request to convert an amount of one crypto currency into another."""

    source: str
    target: str
    amount: float

    def __post_init__(self) -> None:
        if not self.source:
            raise ValueError("invalid from: must be a non empty string")
        if not self.target:
            raise ValueError("invalid to: must be a non empty string")
        if self.amount < 0:
            raise ValueError(
                "invalid amount: must be a non negative number greater than zero"
            )


class _CryptoExchangeRateService(Protocol):
    def calculate_exchange_rate(
        self, source: CurrencyCode, target: CurrencyCode, amount: Amount
    ) -> CalculatedExchangeRate: ...


class _GlobalRatesProvider(Protocol):
    def get_latest_exchange_rates(
        self, query: GlobalExchangeRatesQuery
    ) -> Sequence[GlobalCurrencyExchangeRate]: ...


class _GlobalExchangeRateService(Protocol):
    def calculate_exchange_rates(
        self, *rates: GlobalCurrencyExchangeRate
    ) -> list[CalculatedExchangeRate]: ...


class CryptoExchangeRateHandler:
    """Resolves a crypto exchange query into a calculated exchange rate."""

    def __init__(self, service: _CryptoExchangeRateService) -> None:
        if service is None:
            raise ValueError("crypto exchange rate service is required")
        self._service = service

    def handle(self, query: CryptoExchangeRateQuery) -> CalculatedExchangeRate:
        """Validate the query's values and compute the conversion."""
        try:
            amount = Amount(query.amount)
        except ValueError as exc:
            raise ValueError(f"failed to create decimal from float: {exc}") from exc
        try:
            source = crypto_currency_code(query.source)
            target = crypto_currency_code(query.target)
        except ValueError as exc:
            raise ValueError(f"failed to create crypto currency code: {exc}") from exc
        try:
            return self._service.calculate_exchange_rate(source, target, amount)
        except ValueError as exc:
            raise ValueError(f"failed to calculate exchange rate: {exc}") from exc


class GlobalExchangeRatesHandler:
    """Fetches the latest rates and computes every pairwise exchange."""

    def __init__(
        self, provider: _GlobalRatesProvider, service: _GlobalExchangeRateService
    ) -> None:
        if provider is None:
            raise ValueError("global rates provider is required")
        if service is None:
            raise ValueError("global exchange rate service is required")
        self._provider = provider
        self._service = service

    def handle(self, query: GlobalExchangeRatesQuery) -> list[CalculatedExchangeRate]:
        """Return the cross rates of all currencies named in the query."""
        try:
            rates = self._provider.get_latest_exchange_rates(query)
        except Exception as exc:
            raise ValueError(f"failed to get latest exchange rate: {exc}") from exc
        try:
            return self._service.calculate_exchange_rates(*rates)
        except ValueError as exc:
            raise ValueError(f"failed to calculate exchange rates: {exc}") from exc


@dataclass
class Application:
    """The query handlers the HTTP layer serves."""

    global_exchange_rates_handler: Optional[GlobalExchangeRatesHandler] = None
    crypto_exchange_rate_handler: Optional[CryptoExchangeRateHandler] = None