import math

import pytest

from adapters.arithmetic import FloatArithmetic
from adapters.evaluator.tokenizer import tokenize
from contracts import MalformedExpression, TokenKind


def _symbols(tokens):
    return [op.symbol for op in tokens.operators]


def test_tokenize_splits_operands_and_operators():
    tokens = tokenize("3+4*2", FloatArithmetic())

    assert tokens.operands == [3.0, 4.0, 2.0]
    assert _symbols(tokens) == ["+", "*"]
    assert tokens.binary_count == 2


def test_tokenize_skips_whitespace():
    tokens = tokenize("  12 /  4 ", FloatArithmetic())

    assert tokens.operands == [12.0, 4.0]
    assert _symbols(tokens) == ["/"]


def test_leading_minus_is_unary_negation():
    tokens = tokenize("-3+5", FloatArithmetic())

    assert tokens.operands == [-3.0, 5.0]
    assert _symbols(tokens) == ["+"]


@pytest.mark.parametrize("op", ["*", "/", "^"])
def test_minus_after_multiplicative_operator_is_unary(op):
    tokens = tokenize(f"3{op}-2", FloatArithmetic())

    assert tokens.operands == [3.0, -2.0]
    assert _symbols(tokens) == [op]


def test_minus_after_operand_is_subtraction():
    tokens = tokenize("5-3", FloatArithmetic())

    assert tokens.operands == [5.0, 3.0]
    assert _symbols(tokens) == ["-"]


def test_minus_after_function_name_negates_its_argument():
    tokens = tokenize("log-1.0", FloatArithmetic())

    assert tokens.operands == [-1.0]
    assert tokens.operators[0].kind == TokenKind.FUNCTION
    assert tokens.operators[0].symbol == "log"


def test_spliced_negative_after_plus_is_negation():
    tokens = tokenize("2+-5.0", FloatArithmetic())

    assert tokens.operands == [2.0, -5.0]
    assert _symbols(tokens) == ["+"]


def test_function_names_are_recognized():
    tokens = tokenize("sin0.5*cos1+ctg2-tg3/ln4^log5", FloatArithmetic())

    assert _symbols(tokens) == ["sin", "*", "cos", "+", "ctg", "-", "tg", "/", "ln", "^", "log"]
    assert tokens.binary_count == 5
    assert tokens.operands == [0.5, 1.0, 2.0, 3.0, 4.0, 5.0]


def test_comma_is_accepted_as_decimal_separator():
    tokens = tokenize("1,5+2", FloatArithmetic())

    assert tokens.operands == [1.5, 2.0]


def test_spliced_nan_and_inf_become_operands():
    tokens = tokenize("nan+-inf", FloatArithmetic())

    assert math.isnan(tokens.operands[0])
    assert tokens.operands[1] == -math.inf


@pytest.mark.parametrize(
    "expression",
    [
        "--3",          # tylko jedna flaga negacji
        "3*--2",
        "1.2.3",
        "1,2.3",
        "2+.",
        "2&3",
        "2+x",
        "3*-",
    ],
)
def test_malformed_input_raises(expression):
    with pytest.raises(MalformedExpression):
        tokenize(expression, FloatArithmetic())


def test_empty_expression_yields_no_tokens():
    tokens = tokenize("", FloatArithmetic())

    assert tokens.operands == []
    assert tokens.operators == []


@pytest.mark.parametrize("expression", ["3 * -2", "3 *  - 2", "3*- 2"])
def test_whitespace_around_unary_minus_is_skipped(expression):
    tokens = tokenize(expression, FloatArithmetic())

    assert tokens.operands == [3.0, -2.0]
    assert _symbols(tokens) == ["*"]


def test_whitespace_before_binary_minus_keeps_subtraction():
    tokens = tokenize("5 - 3", FloatArithmetic())

    assert tokens.operands == [5.0, 3.0]
    assert _symbols(tokens) == ["-"]
