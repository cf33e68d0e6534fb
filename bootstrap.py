"""
bootstrap.py — składanie arytmetyki, rejestru providerów i ewaluatora z Settings.
Używane przez CLI (plugcalc.py) i API (api/main.py).

Kolejność rejestracji (pierwszy provider wygrywa):
  1. pluginy z katalogu settings.plugins_dir (posortowane po nazwie pliku)
  2. provider zdalny, jeśli ustawiono settings.remote_provider_url
  3. wbudowany MathFunctionProvider, jeśli settings.builtin_functions
"""
from __future__ import annotations

import logging
from typing import Optional

from adapters.arithmetic import DecimalArithmetic, FloatArithmetic
from adapters.evaluator.staged_evaluator import StagedEvaluator
from adapters.function_provider import (
    FunctionProviderRegistry,
    HttpFunctionProvider,
    MathFunctionProvider,
    PluginLoader,
)
from config import Settings
from ports.arithmetic import Arithmetic

logger = logging.getLogger("plugcalc.bootstrap")


def build_arithmetic(settings: Settings) -> Arithmetic:
    if settings.number_type == "decimal":
        return DecimalArithmetic(precision=settings.decimal_precision)
    return FloatArithmetic()


def _free_name(registry: FunctionProviderRegistry, base: str) -> str:
    """Nazwa `base`, a gdy zajęta przez plugin: base-2, base-3, ..."""
    name, suffix = base, 2
    while name in registry:
        name = f"{base}-{suffix}"
        suffix += 1
    return name


def build_registry(
    settings: Settings,
    loader: Optional[PluginLoader] = None,
) -> FunctionProviderRegistry:
    registry = FunctionProviderRegistry()

    if loader is not None:
        for provider in loader.load(settings.plugins_dir):
            if provider.name in registry:
                logger.warning(
                    "Skipping plugin %s: provider name %r already registered",
                    provider.source, provider.name,
                )
                continue
            registry.register(provider)

    if settings.remote_provider_url:
        registry.register(HttpFunctionProvider(
            url=settings.remote_provider_url,
            timeout_ms=settings.remote_timeout_ms,
            name=_free_name(registry, "remote"),
        ))

    if settings.builtin_functions:
        registry.register(MathFunctionProvider(
            angle_mode=settings.angle_mode,
            name=_free_name(registry, "math"),
        ))

    if not len(registry):
        logger.warning("No function providers registered; sin/cos/tg/ctg/log/ln will fail.")
    return registry


def build_evaluator(settings: Settings) -> tuple[StagedEvaluator, PluginLoader]:
    """Zwraca ewaluator i loader (do wyładowania pluginów przy zamknięciu)."""
    loader = PluginLoader()
    registry = build_registry(settings, loader)
    evaluator = StagedEvaluator(registry, build_arithmetic(settings))
    return evaluator, loader
