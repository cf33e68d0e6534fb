"""
Adapter: DecimalArithmetic
Implementuje port Arithmetic na decimal.Decimal z konfigurowalną precyzją.

Kontekst ma wyłączone wszystkie pułapki (traps), więc niepoprawne operacje
zwracają NaN / Infinity zamiast rzucać wyjątki, tak jak float.
"""
from __future__ import annotations

import decimal
from decimal import Decimal


class DecimalArithmetic:
    """Arytmetyka dziesiętna o zadanej precyzji."""

    name: str = "decimal"

    def __init__(self, precision: int = 28) -> None:
        self._ctx = decimal.Context(prec=precision, traps=[])

    @property
    def precision(self) -> int:
        return self._ctx.prec

    @property
    def nan(self) -> Decimal:
        return Decimal("NaN")

    def is_nan(self, value: Decimal) -> bool:
        return isinstance(value, Decimal) and value.is_nan()

    def parse(self, literal: str) -> Decimal:
        value = self._ctx.create_decimal(literal)
        # Bez pułapek błędna składnia daje cichy NaN
        if value.is_nan() and literal.strip().lower() != "nan":
            raise ValueError(f"Not a decimal number: {literal!r}")
        return value

    def coerce(self, value) -> Decimal:
        if isinstance(value, Decimal):
            return value
        if isinstance(value, float):
            return self._ctx.create_decimal(repr(value))
        return self._ctx.create_decimal(str(value))

    def render(self, value: Decimal) -> str:
        if value.is_nan():
            return "nan"
        if value.is_infinite():
            return "-inf" if value.is_signed() else "inf"
        return format(value, "f")

    # -- operacje ----------------------------------------------------------

    def neg(self, value: Decimal) -> Decimal:
        return self._ctx.minus(value)

    def add(self, left: Decimal, right: Decimal) -> Decimal:
        return self._ctx.add(left, right)

    def sub(self, left: Decimal, right: Decimal) -> Decimal:
        return self._ctx.subtract(left, right)

    def mul(self, left: Decimal, right: Decimal) -> Decimal:
        return self._ctx.multiply(left, right)

    def div(self, left: Decimal, right: Decimal) -> Decimal:
        if right == 0:
            return self.nan
        return self._ctx.divide(left, right)

    def pow(self, base: Decimal, exponent: Decimal) -> Decimal:
        return self._ctx.power(base, exponent)
