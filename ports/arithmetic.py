"""
Port: Arithmetic
Odpowiedzialność: zestaw operacji liczbowych, nad którym działa ewaluator.
Ewaluator nie zna konkretnego typu liczby (float, Decimal, ...).
"""
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Arithmetic(Protocol):
    name: str

    @property
    def nan(self) -> Any:
        """The NaN sentinel of this number type."""
        ...

    def is_nan(self, value: Any) -> bool:
        ...

    def parse(self, literal: str) -> Any:
        """
        Converts a validated literal ("12", "0.5", ".5", "nan", "inf") to a number.
        The decimal separator is always '.' here; the tokenizer normalizes ','.
        Raises ValueError for text that is not a number.
        """
        ...

    def coerce(self, value: Any) -> Any:
        """Converts a value returned by a function provider to this number type."""
        ...

    def render(self, value: Any) -> str:
        """
        Renders a number as plain decimal text (no exponent), "nan", "inf"
        or "-inf", so that it can be spliced into an expression and tokenized again.
        """
        ...

    def neg(self, value: Any) -> Any: ...

    def add(self, left: Any, right: Any) -> Any: ...

    def sub(self, left: Any, right: Any) -> Any: ...

    def mul(self, left: Any, right: Any) -> Any: ...

    def div(self, left: Any, right: Any) -> Any:
        """Division; a zero divisor yields NaN instead of raising."""
        ...

    def pow(self, base: Any, exponent: Any) -> Any:
        """Exponentiation; invalid combinations yield NaN instead of raising."""
        ...
