"""Arbitrary-precision cross-rate arithmetic for currency exchanges."""

from __future__ import annotations

from decimal import (
    ROUND_HALF_UP,
    Context,
    Decimal,
    DecimalException,
    DivisionByZero,
    InvalidOperation,
    Overflow,
)

from .values import Amount, ExchangeRate, Precision

DEFAULT_EXCHANGE_RATE_PRECISION = 50
GLOBAL_CURRENCY_EXCHANGE_RATE_PRECISION = 5


def _parse(text: str) -> Decimal:
    try:
        return Decimal(text)
    except InvalidOperation:
        raise ValueError(f"failed to create decimal from str {text}") from None


def _to_exchange_rate(value: Decimal) -> ExchangeRate:
    return ExchangeRate(format(value, "f"))


class CurrencyExchangeArithmetic:
    """Computes cross rates with a fixed number of significant digits."""

    def __init__(self, precision: int) -> None:
        if isinstance(precision, bool) or not isinstance(precision, int):
            raise TypeError("precision must be an integer")
        if precision <= 0:
            raise ValueError("invalid precision: must be a number greater than 0")
        self.precision = precision
        self._context = Context(
            prec=precision,
            rounding=ROUND_HALF_UP,
            traps=[DivisionByZero, InvalidOperation, Overflow],
        )

    def cross_rate(
        self, first: ExchangeRate, second: ExchangeRate, amount: Amount
    ) -> ExchangeRate:
        """Return ``amount * first / second`` rounded to the context precision."""
        rate1 = _parse(str(first))
        rate2 = _parse(str(second))
        amt = _parse(str(amount))
        try:
            product = self._context.multiply(amt, rate1)
        except DecimalException as exc:
            raise ValueError(
                f"failed to calculate product ({amt} x {first}): {exc!r}"
            ) from exc
        try:
            quotient = self._context.divide(product, rate2)
        except DecimalException as exc:
            raise ValueError(
                f"failed to calculate quotient ({product} / {rate2}): {exc!r}"
            ) from exc
        return _to_exchange_rate(quotient)

    def cross_rate_with_precision(
        self,
        first: ExchangeRate,
        second: ExchangeRate,
        amount: Amount,
        precision: Precision,
    ) -> ExchangeRate:
        """Return the cross rate quantized to ``precision`` decimal places."""
        rate = _parse(str(self.cross_rate(first, second, amount)))
        exponent = Decimal(1).scaleb(-int(precision))
        try:
            final = rate.quantize(exponent, context=self._context)
        except DecimalException as exc:
            raise ValueError(
                f"failed to quantize calculated quotient ({exponent}): {exc!r}"
            ) from exc
        return _to_exchange_rate(final)