"""
Redukcja ztokenizowanego wyrażenia do jednej wartości w trzech przebiegach:

  1. funkcje unarne (sin, cos, tg, ctg, log, ln) — przez rejestr providerów
  2. '*', '/', '^'   — wspólny poziom, od lewej do prawej
  3. '+', '-'        — od lewej do prawej

Każdy przebieg buduje nowe ciągi operandów/operatorów zamiast usuwać
elementy w miejscu; kolejność redukcji od lewej pozostaje ta sama.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from adapters.function_provider.registry import FunctionProviderRegistry
from contracts import (
    ADDITIVE_OPERATORS,
    MULTIPLICATIVE_OPERATORS,
    EmptyResult,
    InvalidFunctionArgument,
    MalformedExpression,
    TokenizedExpression,
    UnsupportedFunction,
)
from ports.arithmetic import Arithmetic

logger = logging.getLogger("plugcalc.evaluator")

# Symbol operatora → nazwa metody portu Arithmetic
_BINARY_METHODS = {
    "+": "add",
    "-": "sub",
    "*": "mul",
    "/": "div",
    "^": "pow",
}


def apply_functions(
    tokens: TokenizedExpression,
    registry: FunctionProviderRegistry,
    arithmetic: Arithmetic,
    steps: Optional[list[str]] = None,
) -> tuple[list[Any], list[str]]:
    """
    Przebieg 1. Funkcja działa na operandzie o indeksie równym liczbie
    operatorów binarnych stojących przed nią.
    Zwraca (operandy, operatory binarne).
    """
    operands = list(tokens.operands)
    binary_ops: list[str] = []

    for token in tokens.operators:
        if not token.is_function:
            binary_ops.append(token.symbol)
            continue

        index = len(binary_ops)
        if index >= len(operands):
            raise MalformedExpression(f"Function {token.symbol!r} has no argument")

        argument = operands[index]
        raw = registry.apply(token.symbol, argument)
        if raw is None:
            raise UnsupportedFunction(token.symbol)

        try:
            result = arithmetic.coerce(raw)
        except (TypeError, ValueError):
            logger.warning("Provider returned non-numeric %s(...) result: %r", token.symbol, raw)
            raise InvalidFunctionArgument(token.symbol, arithmetic.render(argument)) from None
        if arithmetic.is_nan(result):
            raise InvalidFunctionArgument(token.symbol, arithmetic.render(argument))

        operands[index] = result
        if steps is not None:
            steps.append(
                f"{token.symbol}({arithmetic.render(argument)}) = {arithmetic.render(result)}"
            )

    return operands, binary_ops


def reduce_binary(
    operands: list[Any],
    operators: list[str],
    symbols: tuple[str, ...],
    arithmetic: Arithmetic,
    steps: Optional[list[str]] = None,
) -> tuple[list[Any], list[str]]:
    """Przebiegi 2 i 3: redukuje operatory z `symbols`, resztę przepisuje."""
    if len(operands) != len(operators) + 1:
        raise MalformedExpression("Operator is missing an operand")

    out_operands = [operands[0]]
    out_operators: list[str] = []

    for op, right in zip(operators, operands[1:]):
        if op not in symbols:
            out_operators.append(op)
            out_operands.append(right)
            continue

        left = out_operands[-1]
        value = getattr(arithmetic, _BINARY_METHODS[op])(left, right)
        out_operands[-1] = value
        if steps is not None:
            steps.append(
                f"{arithmetic.render(left)} {op} {arithmetic.render(right)} = "
                f"{arithmetic.render(value)}"
            )

    return out_operands, out_operators


def reduce_expression(
    tokens: TokenizedExpression,
    registry: FunctionProviderRegistry,
    arithmetic: Arithmetic,
    steps: Optional[list[str]] = None,
) -> Any:
    """Trzy przebiegi redukcji; zwraca jedyny pozostały operand."""
    operands, operators = apply_functions(tokens, registry, arithmetic, steps)

    if not operands:
        if operators:
            raise MalformedExpression("Operator is missing an operand")
        raise EmptyResult("No operand left after evaluation")

    operands, operators = reduce_binary(
        operands, operators, MULTIPLICATIVE_OPERATORS, arithmetic, steps
    )
    operands, operators = reduce_binary(
        operands, operators, ADDITIVE_OPERATORS, arithmetic, steps
    )

    if operators:
        raise MalformedExpression(f"Unreduced operators left: {operators}")
    if not operands:
        raise EmptyResult("No operand left after evaluation")
    return operands[0]
