"""
Adapter: StagedEvaluator
Implementuje port ExpressionEvaluator: nawiasy → tokenizer → trzy przebiegi.

evaluate()      — liczy wartość; błędy jako wyjątki EvaluationError
try_evaluate()  — to samo, ale błąd wraca jako EvaluationOutcome(ok=False);
                  sesja (REPL, API) działa dalej po błędnym wyrażeniu
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from adapters.arithmetic.float_arithmetic import FloatArithmetic
from adapters.evaluator.bracket_resolver import resolve
from adapters.evaluator.reduction import reduce_expression
from adapters.evaluator.tokenizer import tokenize
from adapters.function_provider.registry import FunctionProviderRegistry
from contracts import EvalResult, EvaluationError, EvaluationOutcome
from ports.arithmetic import Arithmetic

logger = logging.getLogger("plugcalc.evaluator")


class StagedEvaluator:
    """Ewaluator wyrażeń z pluginowymi funkcjami unarnymi."""

    def __init__(
        self,
        registry: FunctionProviderRegistry,
        arithmetic: Optional[Arithmetic] = None,
    ) -> None:
        self._registry = registry
        self._arithmetic = arithmetic or FloatArithmetic()

    @property
    def registry(self) -> FunctionProviderRegistry:
        return self._registry

    @property
    def arithmetic(self) -> Arithmetic:
        return self._arithmetic

    # -- ExpressionEvaluator protocol --------------------------------------

    def evaluate(self, expression: str) -> EvalResult:
        steps: list[str] = []
        value = resolve(
            expression,
            lambda flat: self.evaluate_flat(flat, steps),
            self._arithmetic,
            steps,
        )
        rendered = self._arithmetic.render(value)
        logger.debug("%r = %s (%d steps)", expression, rendered, len(steps))
        return EvalResult(
            expression=expression,
            value=value,
            rendered=rendered,
            is_nan=self._arithmetic.is_nan(value),
            steps=steps,
        )

    def evaluate_flat(self, flat_expression: str, steps: Optional[list[str]] = None) -> Any:
        tokens = tokenize(flat_expression, self._arithmetic)
        return reduce_expression(tokens, self._registry, self._arithmetic, steps)

    def try_evaluate(self, expression: str) -> EvaluationOutcome:
        try:
            result = self.evaluate(expression)
        except EvaluationError as exc:
            logger.info("Evaluation of %r failed [%s]: %s", expression, exc.code, exc)
            return EvaluationOutcome(
                expression=expression,
                ok=False,
                error_code=exc.code,
                error_message=str(exc),
            )
        return EvaluationOutcome(
            expression=expression,
            ok=True,
            result=result.rendered,
            steps=result.steps,
        )
