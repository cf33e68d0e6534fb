"""
Tokenizer płaskich wyrażeń (bez nawiasów).

Zamienia tekst w dwa ciągi: operandy (liczby) i operatory/nazwy funkcji,
oba w kolejności od lewej do prawej.

Klasy znaków:
  cyfry, '.', ','   → bufor literału liczbowego (',' = separator dziesiętny)
  białe znaki       → pomijane
  '-'               → negacja unarna, gdy nie poprzedza go operand
                      (początek, po operatorze lub nazwie funkcji),
                      w przeciwnym razie odejmowanie
  pozostałe         → bufor symbolu, sprawdzany po każdym znaku względem
                      {sin, cos, tg, ctg, log, ln, +, -, /, *, ^}

Symbole "nan" i "inf" trafiają do ciągu operandów; pojawiają się w tekście
po podstawieniu wyniku nawiasu, np. "(5/0)+1" → "nan+1".
"""
from __future__ import annotations

import re

from contracts import (
    BINARY_OPERATORS,
    NUMERIC_CONSTANTS,
    RECOGNIZED_FUNCTIONS,
    MalformedExpression,
    OperatorToken,
    TokenizedExpression,
    TokenKind,
)
from ports.arithmetic import Arithmetic

_NUMBER_RE = re.compile(r"^(?:\d+\.?\d*|\.\d+)$")
_NUMBER_CHARS = frozenset("0123456789.,")

_SYMBOL_KINDS: dict[str, TokenKind] = {
    **{name: TokenKind.FUNCTION for name in RECOGNIZED_FUNCTIONS},
    **{op: TokenKind.BINARY for op in BINARY_OPERATORS},
}


class _Scan:
    """Stan pojedynczego przebiegu tokenizera."""

    def __init__(self, arithmetic: Arithmetic) -> None:
        self.arithmetic = arithmetic
        self.result = TokenizedExpression()
        self.number = ""
        self.symbol = ""
        self.negative = False
        self.expect_operand = True

    def flush_number(self) -> None:
        if not self.number:
            return
        literal = self.number.replace(",", ".")
        if literal not in NUMERIC_CONSTANTS and not _NUMBER_RE.match(literal):
            raise MalformedExpression(f"Malformed number literal: {self.number!r}")
        try:
            value = self.arithmetic.parse(literal)
        except ValueError as exc:
            raise MalformedExpression(f"Malformed number literal: {self.number!r}") from exc
        if self.negative:
            value = self.arithmetic.neg(value)
            self.negative = False
        self.result.operands.append(value)
        self.number = ""

    def emit(self, symbol: str) -> None:
        self.flush_number()
        self.result.operators.append(
            OperatorToken(kind=_SYMBOL_KINDS[symbol], symbol=symbol)
        )
        self.symbol = ""
        self.expect_operand = True


def tokenize(flat_expression: str, arithmetic: Arithmetic) -> TokenizedExpression:
    """
    Tokenizuje płaskie wyrażenie.
    Rzuca MalformedExpression dla błędnych literałów, nieznanych symboli
    i podwójnej negacji unarnej.
    """
    scan = _Scan(arithmetic)

    for ch in flat_expression:
        if ch in _NUMBER_CHARS:
            if scan.symbol:
                raise MalformedExpression(f"Unrecognized symbol: {scan.symbol!r}")
            scan.number += ch
            scan.expect_operand = False
            continue

        if ch.isspace():
            continue

        if ch == "-" and scan.expect_operand and not scan.symbol:
            # Śledzona jest tylko jedna flaga negacji
            if scan.negative:
                raise MalformedExpression(
                    f"Consecutive unary negations are not supported: {flat_expression!r}"
                )
            scan.negative = True
            continue

        scan.symbol += ch.lower()
        if scan.symbol in _SYMBOL_KINDS:
            scan.emit(scan.symbol)
        elif scan.symbol in NUMERIC_CONSTANTS:
            if scan.number:
                raise MalformedExpression(
                    f"Malformed number literal: {scan.number + scan.symbol!r}"
                )
            scan.number = scan.symbol
            scan.symbol = ""
            scan.expect_operand = False

    if scan.symbol:
        raise MalformedExpression(f"Unrecognized symbol: {scan.symbol!r}")
    scan.flush_number()
    if scan.negative:
        raise MalformedExpression(f"Negation without an operand: {flat_expression!r}")

    return scan.result
