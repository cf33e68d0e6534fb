"""
Plugin: trig — sin, cos, tg, ctg (argument w radianach).
"""
import math

PLUGIN_NAME = "trig"


def plugin_func(name, value):
    x = float(value)
    if name == "sin":
        return True, math.sin(x) if math.isfinite(x) else math.nan
    if name == "cos":
        return True, math.cos(x) if math.isfinite(x) else math.nan
    if name == "tg":
        return True, math.tan(x) if math.isfinite(x) else math.nan
    if name == "ctg":
        if not math.isfinite(x) or math.sin(x) == 0:
            return True, math.nan
        return True, math.cos(x) / math.sin(x)
    return False, 0.0
