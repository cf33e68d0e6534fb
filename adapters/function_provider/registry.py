"""
Adapter: FunctionProviderRegistry
Uporządkowana lista providerów funkcji. Zapytanie idzie do providerów
w kolejności rejestracji; pierwszy, który zwróci wartość, wygrywa.

Provider rzucający wyjątek jest logowany i traktowany jak odmowa,
awaria jednego pluginu nie psuje ewaluacji ani kolejnych wyrażeń.
"""
from __future__ import annotations

import logging
from typing import Any, Iterator, Optional

from contracts import ProviderInfo
from ports.function_provider import FunctionProvider

logger = logging.getLogger("plugcalc.registry")


class FunctionProviderRegistry:
    def __init__(self, providers: Optional[list[FunctionProvider]] = None) -> None:
        self._providers: list[FunctionProvider] = []
        for provider in providers or []:
            self.register(provider)

    def register(self, provider: FunctionProvider) -> None:
        if provider.name in self:
            raise ValueError(f"Provider already registered: {provider.name!r}")
        self._providers.append(provider)
        logger.debug("Registered function provider %r", provider.name)

    def unregister(self, name: str) -> FunctionProvider:
        """Usuwa providera po nazwie. KeyError, jeśli nie istnieje."""
        for idx, provider in enumerate(self._providers):
            if provider.name == name:
                del self._providers[idx]
                logger.debug("Unregistered function provider %r", name)
                return provider
        raise KeyError(f"Unknown provider: {name!r}")

    def apply(self, name: str, value: Any) -> Optional[Any]:
        for provider in self._providers:
            try:
                result = provider.try_apply(name, value)
            except Exception as exc:
                logger.warning("Provider %r failed on %s(%s): %s", provider.name, name, value, exc)
                continue
            if result is not None:
                return result
        return None

    def providers(self) -> list[FunctionProvider]:
        return list(self._providers)

    def describe(self) -> list[ProviderInfo]:
        infos: list[ProviderInfo] = []
        for provider in self._providers:
            infos.append(ProviderInfo(
                name=provider.name,
                kind=getattr(provider, "kind", "custom"),
                source=getattr(provider, "source", None),
            ))
        return infos

    def __contains__(self, name: object) -> bool:
        return any(p.name == name for p in self._providers)

    def __len__(self) -> int:
        return len(self._providers)

    def __iter__(self) -> Iterator[FunctionProvider]:
        return iter(list(self._providers))
