# exchangerates

A small HTTP service with two endpoints:

- **`GET /api/v1/rates?currencies=EUR,PLN`**: asks Open Exchange Rates for the latest
  USD-based rates of the listed currencies. It returns the cross rate for every pair of
  them in both directions, rounded to 5 significant digits. The base is always USD, and a
  `base` query parameter is ignored.
- **`GET /api/v1/exchange?from=WBTC&to=USDT&amount=1`**: converts an amount between the
  supported crypto currencies (`BEER`, `FLOKI`, `GATE`, `USDT`, `WBTC`) with a built-in
  rate table. The result is quantized to the decimal places of the target currency.

If a required query parameter is missing, or `amount` is not a number, the answer is
`400 Bad Request` with a JSON body of the form `{"msg": "..."}`. Any other invalid request,
or a failure to get rates from the provider, gets `400 Bad Request` with an empty body.
Every response carries permissive CORS headers (`Access-Control-Allow-Origin: *`).

## Installation

```
pip install .
```

Install the test dependencies with `pip install .[test]`.

## Configuration

The service reads a YAML file. Key names are matched without regard to case:

```yaml
server:
  addr: 127.0.0.1
  port: 8080
open_exchange_rates_api:
  app_id: placeholder
  base_url: https://rates.example.com/api
```

`app_id` is sent to the provider in the header `Authorization: Token <app_id>`. Requests go
to `<base_url>/latest.json` with the query parameters `base` and `symbols`. A failed
connection is retried up to 5 times.

## Running

```
exchangerates --config config.yaml
```

`-config` is also accepted. Without the option the service reads `../config.yaml`. It logs
the loaded configuration and serves until it receives an interrupt (SIGINT), then shuts
down cleanly. If the configuration cannot be read, it logs the error and exits with
status 1.

## Examples

```
$ curl 'http://127.0.0.1:8080/api/v1/rates?currencies=EUR,PLN'
[{"from":"EUR","rate":"4.2686","to":"PLN"},{"from":"PLN","rate":"0.23427","to":"EUR"}]

$ curl 'http://127.0.0.1:8080/api/v1/exchange?from=WBTC&to=USDT&amount=1'
{"amount":"57613.353535","from":"WBTC","to":"USDT"}
```

## Using it as a library

`exchangerates.cli.build_application` connects all the parts from a `Config`, which
`exchangerates.config.load_config` reads from a file. `exchangerates.api.create_app` turns
an `Application` into a Flask app, and `exchangerates.server.make_http_server` wraps one in
a threaded WSGI server. The calculation parts also work on their own:

```python
from exchangerates.arithmetic import CurrencyExchangeArithmetic
from exchangerates.codes import crypto_currency_code
from exchangerates.crypto import CryptoExchangeRateService, default_crypto_exchange_rate_table
from exchangerates.values import Amount

service = CryptoExchangeRateService(
    CurrencyExchangeArithmetic(50), default_crypto_exchange_rate_table()
)
result = service.calculate_exchange_rate(
    crypto_currency_code("WBTC"), crypto_currency_code("USDT"), Amount(1)
)
print(result.from_to(), result.rate)  # WBTC->USDT 57613.353535
```

## Limits

The crypto rates are fixed in `default_crypto_exchange_rate_table` and are never updated.
Rates fetched from the provider are not cached or stored. Every `/api/v1/rates` request
makes a new request upstream.