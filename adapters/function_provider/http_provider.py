"""
Adapter: HttpFunctionProvider
Provider funkcji liczonych przez zewnętrzną usługę HTTP.

Żądanie:   POST {"name": "sin", "value": 0.5}
Odpowiedź: {"handled": true, "value": 0.479...}
           (opcjonalnie opakowane w klucz "result")

Błąd połączenia / HTTP / niepoprawna odpowiedź → logowany, provider odmawia.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Optional

import httpx
from pydantic import BaseModel, ValidationError

logger = logging.getLogger("plugcalc.http_provider")


class _RemoteApplyOutput(BaseModel):
    handled: bool = False
    value: Optional[float] = None


class HttpFunctionProvider:
    """Zdalny provider funkcji unarnych."""

    kind: str = "remote"

    def __init__(self, url: str, timeout_ms: int = 2_000, name: str = "remote") -> None:
        self.name = name
        self._url = url.strip()
        self._timeout = timeout_ms / 1000.0

    @property
    def source(self) -> str:
        return self._url

    def try_apply(self, name: str, value: Any) -> Optional[float]:
        if not self._url:
            return None
        try:
            output = self._call_backend(name, float(value))
        except (httpx.HTTPError, ValidationError, ValueError) as exc:
            logger.warning("Remote provider %r failed on %s: %s", self.name, name, exc)
            return None

        if not output.handled:
            return None
        # null z usługi = argument spoza dziedziny
        return math.nan if output.value is None else output.value

    def _call_backend(self, name: str, value: float) -> _RemoteApplyOutput:
        # JSON nie przenosi NaN/inf, wysyłamy je jako tekst
        payload_value: Any = value if math.isfinite(value) else str(value)
        response = httpx.post(
            self._url,
            json={"name": name, "value": payload_value},
            timeout=self._timeout,
        )
        response.raise_for_status()
        payload: Any = response.json()

        # Część usług opakowuje wynik w klucz "result".
        if isinstance(payload, dict) and isinstance(payload.get("result"), dict):
            payload = payload["result"]
        return _RemoteApplyOutput.model_validate(payload)
