"""
dependencies.py — FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni adapter przez Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from adapters.evaluator.staged_evaluator import StagedEvaluator
from adapters.function_provider.registry import FunctionProviderRegistry


def get_evaluator(request: Request) -> StagedEvaluator:
    return request.app.state.evaluator


def get_registry(request: Request) -> FunctionProviderRegistry:
    return request.app.state.evaluator.registry
