"""Client for the Open Exchange Rates latest-rates endpoint."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

import requests
from requests.adapters import HTTPAdapter

from .codes import global_currency_code
from .queries import GlobalExchangeRatesQuery
from .values import Amount, GlobalCurrencyExchangeRate

_LATEST_PATH = "/latest.json"
_RETRY_COUNT = 5


@dataclass(frozen=True)
class OpenExchangeRatesConfig:
    """Credentials and endpoint of the rates provider."""

    app_id: str = ""
    base_url: str = ""


@dataclass
class ExchangeRatesDTO:
    """The provider's latest-rates response body."""

    disclaimer: str = ""
    license: str = ""
    timestamp: int = 0
    base: str = ""
    rates: dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Union[str, bytes, Mapping[str, Any]]) -> ExchangeRatesDTO:
        """Build from a decoded JSON object or from JSON text."""
        if isinstance(data, (str, bytes, bytearray)):
            data = json.loads(data)
        if not isinstance(data, Mapping):
            raise ValueError("exchange rates response must be a JSON object")
        return cls(
            disclaimer=str(data.get("disclaimer", "")),
            license=str(data.get("license", "")),
            timestamp=int(data.get("timestamp", 0)),
            base=str(data.get("base", "")),
            rates={str(k): float(v) for k, v in (data.get("rates") or {}).items()},
        )

    def to_global_currency_exchange_rates(self) -> list[GlobalCurrencyExchangeRate]:
        """Convert the rates map into validated domain values."""
        result = []
        for code_text, value in self.rates.items():
            try:
                code = global_currency_code(code_text)
            except ValueError as exc:
                raise type(exc)(
                    f"failed to create global currency code: {exc}"
                ) from exc
            try:
                amount = Amount(value)
            except ValueError as exc:
                raise ValueError(f"failed to create decimal: {exc}") from exc
            result.append(GlobalCurrencyExchangeRate(code, amount))
        return result


class OpenExchangeRatesClient:
    """Fetches the latest rates for a base currency and a set of symbols."""

    def __init__(
        self,
        config: OpenExchangeRatesConfig,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        if session is None:
            session = requests.Session()
            adapter = HTTPAdapter(max_retries=_RETRY_COUNT)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        session.headers["Authorization"] = "Token " + config.app_id
        self._session = session

    @property
    def url(self) -> str:
        return self.config.base_url.rstrip("/") + _LATEST_PATH

    def get_latest_exchange_rates(
        self, query: GlobalExchangeRatesQuery
    ) -> list[GlobalCurrencyExchangeRate]:
        """Request the latest rates described by ``query``."""
        url = self.url
        try:
            response = self._session.get(
                url, params={"base": query.base, "symbols": query.currencies}
            )
        except requests.RequestException as exc:
            raise requests.ConnectionError(
                f"failed to send HTTP GET req to url {url}: {exc}"
            ) from exc

        if response.status_code >= 400:
            raise requests.HTTPError(
                f"failed to send HTTP GET req to url {url}. "
                f"Status code: {response.status_code} {response.reason}",
                response=response,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise ValueError(f"failed to decode response from {url}: {exc}") from exc
        return ExchangeRatesDTO.from_json(payload).to_global_currency_exchange_rates()