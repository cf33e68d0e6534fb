"""
Plugin: logarithms — log (dziesiętny) i ln (naturalny).
Dla x <= 0 zwraca NaN, co ewaluator zgłasza jako błędny argument funkcji.
"""
import math

PLUGIN_NAME = "logarithms"


def plugin_func(name, value):
    x = float(value)
    if name not in ("log", "ln"):
        return False, 0.0
    if math.isnan(x) or x <= 0:
        return True, math.nan
    return True, math.log10(x) if name == "log" else math.log(x)
