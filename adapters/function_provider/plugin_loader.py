"""
Adapter: PluginLoader + ModuleFunctionProvider
Ładuje providery funkcji z plików *.py w katalogu pluginów.

Kontrakt pliku pluginu:
    PLUGIN_NAME = "trig_degrees"          # opcjonalnie, domyślnie nazwa pliku

    def plugin_func(name: str, value: float) -> tuple[bool, float]:
        # (True, wynik)  — funkcja obsłużona
        # (False, 0.0)   — provider nie zna tej funkcji
        ...

Pliki zaczynające się od '_' są pomijane. Plik bez plugin_func albo
rzucający przy imporcie jest logowany i pomijany.
"""
from __future__ import annotations

import importlib.util
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Optional, Union

logger = logging.getLogger("plugcalc.plugin_loader")

PLUGIN_ENTRYPOINT = "plugin_func"
_MODULE_PREFIX = "_plugcalc_plugin_"

PluginFunction = Callable[[str, Any], tuple[bool, Any]]


class ModuleFunctionProvider:
    """Provider opakowujący funkcję plugin_func z załadowanego modułu."""

    kind: str = "plugin"

    def __init__(
        self,
        name: str,
        func: PluginFunction,
        source: Optional[str] = None,
        module_name: Optional[str] = None,
    ) -> None:
        self.name = name
        self.source = source
        self.module_name = module_name
        self._func = func

    def try_apply(self, name: str, value: Any) -> Optional[Any]:
        handled, result = self._func(name, value)
        if not handled:
            return None
        return result


class PluginLoader:
    """Skanuje katalog, importuje pluginy i pozwala je wyładować."""

    def __init__(self, entrypoint: str = PLUGIN_ENTRYPOINT) -> None:
        self._entrypoint = entrypoint
        self._loaded: list[ModuleFunctionProvider] = []

    @property
    def loaded(self) -> list[ModuleFunctionProvider]:
        return list(self._loaded)

    def load(self, directory: Union[str, Path]) -> list[ModuleFunctionProvider]:
        root = Path(directory)
        if not root.is_dir():
            logger.warning("Plugin directory not found: %s", root)
            return []

        providers: list[ModuleFunctionProvider] = []
        for path in sorted(root.glob("*.py")):
            if path.name.startswith("_"):
                continue
            provider = self._load_file(path)
            if provider is not None:
                providers.append(provider)

        self._loaded.extend(providers)
        logger.info("Loaded %d plugin(s) from %s", len(providers), root)
        return providers

    def _load_file(self, path: Path) -> Optional[ModuleFunctionProvider]:
        module_name = f"{_MODULE_PREFIX}{path.stem}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            logger.error("Cannot load plugin: %s", path)
            return None

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            sys.modules.pop(module_name, None)
            logger.error("Error loading plugin %s: %s", path, exc)
            return None

        func = getattr(module, self._entrypoint, None)
        if not callable(func):
            sys.modules.pop(module_name, None)
            logger.error("Error: function %s not in %s", self._entrypoint, path)
            return None

        name = getattr(module, "PLUGIN_NAME", None) or path.stem
        logger.debug("Plugin %r loaded from %s", name, path)
        return ModuleFunctionProvider(
            name=str(name),
            func=func,
            source=str(path),
            module_name=module_name,
        )

    def unload_all(self) -> int:
        count = len(self._loaded)
        for provider in self._loaded:
            if provider.module_name:
                sys.modules.pop(provider.module_name, None)
        self._loaded.clear()
        logger.debug("Unloaded %d plugin(s)", count)
        return count
