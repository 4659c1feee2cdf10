"""HTTP interface serving crypto and global exchange rates."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional

from flask import Flask, Response, jsonify, request

from .codes import USD
from .queries import Application, CryptoExchangeRateQuery, GlobalExchangeRatesQuery
from .values import CalculatedExchangeRate

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,POST,PUT,PATCH,DELETE,HEAD,OPTIONS",
    "Access-Control-Allow-Headers": "Origin,Content-Length,Content-Type",
    "Access-Control-Max-Age": "43200",
}


@dataclass(frozen=True)
class CryptoExchangeRateDTO:
    """Response body of a crypto conversion."""

    amount: str
    source: str
    target: str

    def to_json(self) -> dict[str, str]:
        return {"amount": self.amount, "from": self.source, "to": self.target}


@dataclass(frozen=True)
class GlobalExchangeRateDTO:
    """One directed exchange rate between two global currencies."""

    source: str
    rate: str
    target: str

    def to_json(self) -> dict[str, str]:
        return {"from": self.source, "rate": self.rate, "to": self.target}


@dataclass(frozen=True)
class ErrorDTO:
    """An error description."""

    code: str
    message: str

    def to_json(self) -> dict[str, str]:
        return asdict(self)


def to_crypto_exchange_rate_dto(rate: CalculatedExchangeRate) -> CryptoExchangeRateDTO:
    """Convert a calculated crypto conversion to its response form."""
    return CryptoExchangeRateDTO(
        amount=str(rate.rate), source=str(rate.source), target=str(rate.target)
    )


def to_global_exchange_rate_dtos(
    *rates: CalculatedExchangeRate,
) -> list[GlobalExchangeRateDTO]:
    """Convert calculated global rates to their response form, in order."""
    return [
        GlobalExchangeRateDTO(
            source=str(r.source), rate=str(r.rate), target=str(r.target)
        )
        for r in rates
    ]


class _ParameterError(ValueError):
    pass


def _required_arg(name: str) -> str:
    value = request.args.get(name)
    if value is None:
        raise _ParameterError(f"Query argument {name} is required, but not found")
    return value


def _required_float(name: str) -> float:
    text = _required_arg(name)
    try:
        return float(text)
    except ValueError:
        raise _ParameterError(
            f"Invalid format for parameter {name}: cannot parse {text!r} as a number"
        ) from None


def _bad_request() -> Response:
    return Response(status=400)


def create_app(application: Optional[Application]) -> Flask:
    """Build the Flask application exposing the exchange-rate endpoints."""
    if application is None:
        raise ValueError("application component is required")

    app = Flask(__name__)

    @app.errorhandler(_ParameterError)
    def _parameter_error(exc: _ParameterError) -> Any:
        return jsonify({"msg": str(exc)}), 400

    @app.after_request
    def _cors(response: Response) -> Response:
        for header, value in _CORS_HEADERS.items():
            response.headers.setdefault(header, value)
        return response

    @app.get("/api/v1/exchange")
    def get_crypto_exchange_rate() -> Any:
        source = _required_arg("from")
        target = _required_arg("to")
        amount = _required_float("amount")

        handler = application.crypto_exchange_rate_handler
        if handler is None:
            return Response(status=500)
        try:
            query = CryptoExchangeRateQuery(source, target, amount)
            exchange = handler.handle(query)
        except ValueError:
            return _bad_request()
        return jsonify(to_crypto_exchange_rate_dto(exchange).to_json()), 200

    @app.get("/api/v1/rates")
    def get_global_exchange_rates() -> Any:
        currencies = _required_arg("currencies")

        handler = application.global_exchange_rates_handler
        if handler is None:
            return Response(status=500)
        try:
            query = GlobalExchangeRatesQuery(currencies, str(USD))
            exchanges = handler.handle(query)
        except ValueError:
            return _bad_request()
        return jsonify([dto.to_json() for dto in to_global_exchange_rate_dtos(*exchanges)]), 200

    return app