"""Value objects for amounts, precisions and exchange rates."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal

from .codes import CurrencyCode

_EXCHANGE_RATE_PATTERN = re.compile(r"[0-9]+(\.[0-9]+)?")
_MAX_PRECISION = 2**32 - 1


def _format_shortest(value: float) -> str:
    """Format a float with the shortest exact digits, switching to exponent
    notation when the decimal exponent is below -4 or at least 6."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    if value == 0:
        return sign + "0"
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    point = len(digits) + exponent
    exp = point - 1
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "-" if exp < 0 else "+"
        return f"{sign}{mantissa}e{exp_sign}{abs(exp):02d}"
    if point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return sign + digits + "0" * (point - len(digits))
    return f"{sign}{digits[:point]}.{digits[point:]}"


@dataclass(frozen=True)
class Amount:
    """A non-negative floating-point quantity."""

    value: float = 0.0

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("invalid value: must be a non-negative number")
        object.__setattr__(self, "value", float(self.value))

    def __str__(self) -> str:
        return _format_shortest(self.value)

    def __float__(self) -> float:
        return self.value

    def is_zero(self) -> bool:
        """Return True when the amount equals zero."""
        return self.value == 0


@dataclass(frozen=True)
class Precision:
    """A positive number of decimal places."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("precision must be an integer")
        if self.value <= 0:
            raise ValueError("invalid precision: must be a number greater than zero")
        if self.value > _MAX_PRECISION:
            raise ValueError("invalid precision: value is too large")

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class ExchangeRate:
    """A non-negative decimal rate held in its exact textual form."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _EXCHANGE_RATE_PATTERN.fullmatch(
            self.value
        ):
            raise ValueError("invalid exchange rate: must be a non-negative number")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CalculatedExchangeRate:
    """The result of converting from one currency to another."""

    source: CurrencyCode
    target: CurrencyCode
    rate: ExchangeRate

    def from_to(self) -> str:
        """Return the pair label ``"<source>-><target>"``."""
        return self.source.from_to(self.target)


@dataclass(frozen=True)
class GlobalCurrencyExchangeRate:
    """A currency and its rate against the provider's base currency."""

    code: CurrencyCode
    rate: Amount