"""
Port: FunctionProvider
Odpowiedzialność: obliczanie nazwanej funkcji unarnej albo odmowa.
Skąd provider pochodzi (plik, biblioteka, usługa HTTP) jest poza ewaluatorem.
"""
from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class FunctionProvider(Protocol):
    name: str

    def try_apply(self, name: str, value: Any) -> Optional[Any]:
        """
        Computes function `name` ("sin", "cos", "tg", "ctg", "log", "ln")
        for a single argument.
        Returns the computed value, or None if this provider does not handle `name`.
        A NaN return value means the argument is outside the function's domain.
        Must be side-effect free and safe to call re-entrantly.
        """
        ...
