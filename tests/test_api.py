from dataclasses import dataclass, field

import pytest

from exchangerates.api import (
    CryptoExchangeRateDTO,
    ErrorDTO,
    GlobalExchangeRateDTO,
    create_app,
    to_crypto_exchange_rate_dto,
    to_global_exchange_rate_dtos,
)
from exchangerates.arithmetic import (
    DEFAULT_EXCHANGE_RATE_PRECISION,
    GLOBAL_CURRENCY_EXCHANGE_RATE_PRECISION,
    CurrencyExchangeArithmetic,
)
from exchangerates.codes import EUR, PLN, USDT, WBTC, global_currency_code
from exchangerates.crypto import (
    CryptoExchangeRateEntry,
    CryptoExchangeRateService,
    CryptoExchangeRateTable,
    default_crypto_exchange_rate_table,
)
from exchangerates.global_rates import GlobalExchangeRateService
from exchangerates.queries import (
    Application,
    CryptoExchangeRateHandler,
    GlobalExchangeRatesHandler,
)
from exchangerates.values import (
    Amount,
    CalculatedExchangeRate,
    ExchangeRate,
    GlobalCurrencyExchangeRate,
    Precision,
)

DEFAULT_RATES = {"EUR": 0.867717, "PLN": 3.703935}


@dataclass
class FakeGlobalRatesProvider:
    rates: dict = field(default_factory=dict)
    error: Exception = None
    called: bool = False
    queries: list = field(default_factory=list)

    def get_latest_exchange_rates(self, query):
        self.called = True
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return [
            GlobalCurrencyExchangeRate(global_currency_code(k), Amount(v))
            for k, v in self.rates.items()
        ]


def _global_client(provider):
    application = Application(
        global_exchange_rates_handler=GlobalExchangeRatesHandler(
            provider,
            GlobalExchangeRateService(
                CurrencyExchangeArithmetic(GLOBAL_CURRENCY_EXCHANGE_RATE_PRECISION)
            ),
        )
    )
    return create_app(application).test_client()


def _crypto_client(service):
    application = Application(
        crypto_exchange_rate_handler=CryptoExchangeRateHandler(service)
    )
    return create_app(application).test_client()


@pytest.mark.parametrize(
    "params, expected_called",
    [
        ({}, False),
        ({"base": "USD"}, False),
        ({"base": "USD", "currencies": "PLN"}, True),
    ],
)
def test_global_rates_negative_cases(params, expected_called):
    provider = FakeGlobalRatesProvider()
    client = _global_client(provider)

    resp = client.get("/api/v1/rates", query_string=params)

    assert resp.status_code == 400
    assert provider.called is expected_called


def test_global_rates_positive_case():
    provider = FakeGlobalRatesProvider(rates=dict(DEFAULT_RATES))
    client = _global_client(provider)

    resp = client.get(
        "/api/v1/rates", query_string={"currencies": "EUR,PLN", "base": "USD"}
    )

    assert resp.status_code == 200
    assert resp.get_json() == [
        {"from": "EUR", "to": "PLN", "rate": "4.2686"},
        {"from": "PLN", "to": "EUR", "rate": "0.23427"},
    ]
    assert provider.called is True


def test_global_rates_query_uses_usd_base():
    provider = FakeGlobalRatesProvider(rates=dict(DEFAULT_RATES))
    client = _global_client(provider)

    client.get("/api/v1/rates", query_string={"currencies": "EUR,PLN"})

    assert provider.queries[0].base == "USD"
    assert provider.queries[0].currencies == "EUR,PLN"


def test_global_rates_provider_failure_gives_400():
    provider = FakeGlobalRatesProvider(error=ConnectionError("down"))
    client = _global_client(provider)

    resp = client.get("/api/v1/rates", query_string={"currencies": "EUR,PLN"})

    assert resp.status_code == 400
    assert provider.called is True


def test_missing_currencies_reports_parameter():
    client = _global_client(FakeGlobalRatesProvider())

    resp = client.get("/api/v1/rates")

    assert resp.status_code == 400
    assert "currencies" in resp.get_json()["msg"]


@pytest.mark.parametrize(
    "params",
    [
        {},
        {"from": "WBTC"},
        {"to": "WBTC"},
        {"amount": "1"},
        {"from": "USDT", "to": "WBTC"},
    ],
)
def test_crypto_negative_cases(params):
    service = CryptoExchangeRateService(
        CurrencyExchangeArithmetic(GLOBAL_CURRENCY_EXCHANGE_RATE_PRECISION),
        CryptoExchangeRateTable(),
    )
    client = _crypto_client(service)

    resp = client.get("/api/v1/exchange", query_string=params)

    assert resp.status_code == 400


def test_crypto_positive_case():
    table = CryptoExchangeRateTable()
    table.add_exchange_rate(
        USDT, CryptoExchangeRateEntry(ExchangeRate("0.990"), Precision(6))
    )
    table.add_exchange_rate(
        WBTC, CryptoExchangeRateEntry(ExchangeRate("57037.22"), Precision(5))
    )
    service = CryptoExchangeRateService(
        CurrencyExchangeArithmetic(DEFAULT_EXCHANGE_RATE_PRECISION), table
    )
    client = _crypto_client(service)

    resp = client.get(
        "/api/v1/exchange", query_string={"from": "WBTC", "to": "USDT", "amount": "1"}
    )

    assert resp.status_code == 200
    assert resp.get_json() == {"from": "WBTC", "amount": "57613.353535", "to": "USDT"}


@pytest.mark.parametrize(
    "params",
    [
        {"from": "WBTC", "to": "USDT", "amount": "abc"},
        {"from": "WBTC", "to": "USDT", "amount": "-1"},
        {"from": "XXX", "to": "USDT", "amount": "1"},
        {"from": "WBTC", "to": "EUR", "amount": "1"},
    ],
)
def test_crypto_invalid_values_give_400(params):
    service = CryptoExchangeRateService(
        CurrencyExchangeArithmetic(DEFAULT_EXCHANGE_RATE_PRECISION),
        default_crypto_exchange_rate_table(),
    )
    client = _crypto_client(service)

    resp = client.get("/api/v1/exchange", query_string=params)

    assert resp.status_code == 400


def test_missing_amount_reports_parameter():
    service = CryptoExchangeRateService(
        CurrencyExchangeArithmetic(DEFAULT_EXCHANGE_RATE_PRECISION),
        default_crypto_exchange_rate_table(),
    )
    client = _crypto_client(service)

    resp = client.get("/api/v1/exchange", query_string={"from": "WBTC", "to": "USDT"})

    assert resp.status_code == 400
    assert "amount" in resp.get_json()["msg"]


def test_cors_header_is_set():
    client = _global_client(FakeGlobalRatesProvider(rates=dict(DEFAULT_RATES)))

    resp = client.get(
        "/api/v1/rates",
        query_string={"currencies": "EUR,PLN"},
        headers={"Origin": "http://localhost"},
    )

    assert resp.headers["Access-Control-Allow-Origin"] == "*"


def test_create_app_requires_application():
    with pytest.raises(ValueError, match="application component is required"):
        create_app(None)


def test_to_crypto_exchange_rate_dto():
    rate = CalculatedExchangeRate(WBTC, USDT, ExchangeRate("57613.353535"))

    dto = to_crypto_exchange_rate_dto(rate)

    assert dto == CryptoExchangeRateDTO(
        amount="57613.353535", source="WBTC", target="USDT"
    )
    assert dto.to_json() == {"amount": "57613.353535", "from": "WBTC", "to": "USDT"}


def test_to_global_exchange_rate_dtos_keeps_order():
    rates = [
        CalculatedExchangeRate(EUR, PLN, ExchangeRate("4.2686")),
        CalculatedExchangeRate(PLN, EUR, ExchangeRate("0.23427")),
    ]

    dtos = to_global_exchange_rate_dtos(*rates)

    assert dtos == [
        GlobalExchangeRateDTO(source="EUR", rate="4.2686", target="PLN"),
        GlobalExchangeRateDTO(source="PLN", rate="0.23427", target="EUR"),
    ]


def test_to_global_exchange_rate_dtos_empty():
    assert to_global_exchange_rate_dtos() == []


def test_error_dto_to_json():
    assert ErrorDTO(code="400", message="bad").to_json() == {
        "code": "400",
        "message": "bad",
    }