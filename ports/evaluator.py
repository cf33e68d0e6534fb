"""
Port: ExpressionEvaluator
Odpowiedzialność: deterministyczne liczenie wyrażeń tekstowych bez AST.
"""
from typing import Any, Protocol, runtime_checkable

from contracts import EvalResult, EvaluationOutcome


@runtime_checkable
class ExpressionEvaluator(Protocol):
    def evaluate(self, expression: str) -> EvalResult:
        """
        Evaluates an expression with parentheses, binary operators
        (+ - * / ^), unary minus and the functions sin, cos, tg, ctg, log, ln.
        Returns EvalResult with:
          - value: number in the evaluator's arithmetic (NaN after x/0)
          - steps: list of human-readable reduction steps
        Raises MalformedExpression, UnsupportedFunction,
        InvalidFunctionArgument or EmptyResult (all EvaluationError).
        """
        ...

    def evaluate_flat(self, flat_expression: str) -> Any:
        """Evaluates an expression that contains no parentheses."""
        ...

    def try_evaluate(self, expression: str) -> EvaluationOutcome:
        """
        Same as evaluate(), but never raises for EvaluationError;
        errors are encoded in the returned object.
        """
        ...
