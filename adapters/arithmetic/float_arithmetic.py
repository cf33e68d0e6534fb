"""
Adapter: FloatArithmetic
Implementuje port Arithmetic na typie float (IEEE-754, moduł math).

Dzielenie przez zero → NaN, potęgowanie zgodne z semantyką C pow():
  (-8) ^ 0.5  → nan
  0 ^ -1      → inf
  przepełnienie → ±inf
"""
from __future__ import annotations

import math
from decimal import Decimal


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


class FloatArithmetic:
    """Arytmetyka zmiennoprzecinkowa podwójnej precyzji."""

    name: str = "float"

    @property
    def nan(self) -> float:
        return math.nan

    def is_nan(self, value: float) -> bool:
        return isinstance(value, float) and math.isnan(value)

    def parse(self, literal: str) -> float:
        return float(literal)

    def coerce(self, value) -> float:
        return float(value)

    def render(self, value: float) -> str:
        if math.isnan(value):
            return "nan"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        text = repr(float(value))
        # repr() przechodzi na notację wykładniczą dla bardzo dużych/małych liczb
        if "e" in text:
            text = format(Decimal(text), "f")
        return text

    # -- operacje ----------------------------------------------------------

    def neg(self, value: float) -> float:
        return -value

    def add(self, left: float, right: float) -> float:
        return left + right

    def sub(self, left: float, right: float) -> float:
        return left - right

    def mul(self, left: float, right: float) -> float:
        return left * right

    def div(self, left: float, right: float) -> float:
        if right == 0:
            return math.nan
        return left / right

    def pow(self, base: float, exponent: float) -> float:
        try:
            return math.pow(base, exponent)
        except ValueError:
            if base == 0 and exponent < 0:
                return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
            return math.nan
        except OverflowError:
            if base < 0 and _is_odd_integer(exponent):
                return -math.inf
            return math.inf
