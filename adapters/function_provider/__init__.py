from .http_provider import HttpFunctionProvider
from .math_provider import MathFunctionProvider
from .plugin_loader import ModuleFunctionProvider, PluginLoader
from .registry import FunctionProviderRegistry

__all__ = [
    "FunctionProviderRegistry",
    "HttpFunctionProvider",
    "MathFunctionProvider",
    "ModuleFunctionProvider",
    "PluginLoader",
]
