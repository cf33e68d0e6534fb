"""
contracts.py — Jedyne źródło prawdy dla typów danych i błędów w PlugCalc.
Wszystkie moduły importują WYŁĄCZNIE stąd.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── Tokeny ──────────────────────────────────────

RECOGNIZED_FUNCTIONS = ("sin", "cos", "tg", "ctg", "log", "ln")
BINARY_OPERATORS = ("+", "-", "*", "/", "^")
MULTIPLICATIVE_OPERATORS = ("*", "/", "^")
ADDITIVE_OPERATORS = ("+", "-")

# Stałe, które mogą pojawić się w tekście po podstawieniu wyniku nawiasu
NUMERIC_CONSTANTS = ("nan", "inf")


class TokenKind(str, Enum):
    BINARY = "binary"        # + - * / ^
    FUNCTION = "function"    # sin, cos, tg, ctg, log, ln


class OperatorToken(BaseModel):
    kind: TokenKind
    symbol: str

    @property
    def is_function(self) -> bool:
        return self.kind == TokenKind.FUNCTION


class TokenizedExpression(BaseModel):
    """Ciąg operandów i ciąg operatorów/funkcji, w kolejności od lewej."""
    operands: list[Any] = Field(default_factory=list)
    operators: list[OperatorToken] = Field(default_factory=list)

    @property
    def binary_count(self) -> int:
        return sum(1 for op in self.operators if not op.is_function)


# ─────────────────────────── Providery ───────────────────────────────────

class ProviderInfo(BaseModel):
    name: str
    kind: str                     # "builtin", "plugin", "remote", ...
    source: Optional[str] = None  # ścieżka pliku / URL


# ─────────────────────────── Evaluator ───────────────────────────────────

class EvalResult(BaseModel):
    expression: str
    value: Any                    # float lub Decimal, zależnie od arytmetyki
    rendered: str                 # tekstowa postać wyniku
    is_nan: bool = False
    steps: list[str] = Field(default_factory=list)  # czytelne kroki


class EvaluationOutcome(BaseModel):
    """Wynik dla sesji interaktywnej: sukces albo opis błędu, nigdy wyjątek."""
    expression: str
    ok: bool
    result: Optional[str] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    steps: list[str] = Field(default_factory=list)


# ─────────────────────────── Błędy ───────────────────────────────────────

class EvaluationError(Exception):
    """Bazowy błąd ewaluacji wyrażenia."""

    code = "EVALUATION_ERROR"


class MalformedExpression(EvaluationError):
    """Niesparowany nawias, błędny literał, operator bez operandu."""

    code = "MALFORMED_EXPRESSION"


class UnsupportedFunction(MalformedExpression):
    """Żaden zarejestrowany provider nie obsłużył nazwy funkcji."""

    code = "UNSUPPORTED_FUNCTION"

    def __init__(self, function: str) -> None:
        super().__init__(f"No provider handles function {function!r}")
        self.function = function


class InvalidFunctionArgument(EvaluationError):
    """Provider zwrócił NaN: argument spoza dziedziny funkcji."""

    code = "INVALID_FUNCTION_ARGUMENT"

    def __init__(self, function: str, argument: Any) -> None:
        super().__init__(
            f"Function argument of {function!r} is out of its domain: {argument}"
        )
        self.function = function
        self.argument = argument


class EmptyResult(EvaluationError):
    """Po redukcji nie został żaden operand."""

    code = "EMPTY_RESULT"
