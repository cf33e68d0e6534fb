"""
schemas.py — Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from pydantic import BaseModel, Field

from contracts import ProviderInfo


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(BaseModel):
    expression: str = Field(..., min_length=1, max_length=10_000)


class EvaluateResponse(BaseModel):
    expression: str
    result: str          # tekstowo, JSON nie przenosi NaN
    is_nan: bool
    steps: list[str]


class ErrorResponse(BaseModel):
    code: str
    detail: str


# ─────────────────────────── /providers ──────────────────────────

class ProvidersResponse(BaseModel):
    providers: list[ProviderInfo]


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    providers: int
    number_type: str
    version: str
