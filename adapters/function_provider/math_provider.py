"""
Adapter: MathFunctionProvider
Wbudowany provider funkcji oparty na module math.

  sin, cos, tg, ctg — argument w radianach lub stopniach (angle_mode)
  log               — logarytm dziesiętny
  ln                — logarytm naturalny

Argument spoza dziedziny (log(-1), ctg(0), sin(inf)) → NaN.
"""
from __future__ import annotations

import math
from typing import Any, Callable, Optional


def _ctg(x: float) -> float:
    sin_x = math.sin(x)
    if sin_x == 0:
        return math.nan
    return math.cos(x) / sin_x


class MathFunctionProvider:
    """Funkcje unarne z biblioteki standardowej."""

    kind: str = "builtin"
    source: Optional[str] = "math"

    def __init__(self, angle_mode: str = "rad", name: str = "math") -> None:
        if angle_mode not in ("rad", "deg"):
            raise ValueError("angle_mode musi być 'rad' albo 'deg'")
        self.name = name
        self._angle_mode = angle_mode
        self._table = self._functions()

    @property
    def angle_mode(self) -> str:
        return self._angle_mode

    def _functions(self) -> dict[str, Callable[[float], float]]:
        mode = self._angle_mode

        def _trig(fn: Callable[[float], float]) -> Callable[[float], float]:
            def w(x: float) -> float:
                return fn(math.radians(x) if mode == "deg" else x)

            return w

        return {
            "sin": _trig(math.sin),
            "cos": _trig(math.cos),
            "tg": _trig(math.tan),
            "ctg": _trig(_ctg),
            "log": math.log10,
            "ln": math.log,
        }

    def try_apply(self, name: str, value: Any) -> Optional[float]:
        fn = self._table.get(name)
        if fn is None:
            return None
        try:
            return fn(float(value))
        except (ValueError, OverflowError):
            return math.nan
