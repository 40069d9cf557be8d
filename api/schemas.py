"""
schemas.py — Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from contracts import EvaluationError, ExprAST


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(BaseModel):
    expr: ExprAST
    steps: bool = False  # dołącza kroki obliczenia do odpowiedzi


class EvaluateResponse(BaseModel):
    value: str  # format_rational — tekst kanoniczny, np. "5/6"
    is_integer: bool
    rendered: str
    steps: list[str] = Field(default_factory=list)


# ─────────────────────────── /render ─────────────────────────────

class RenderRequest(BaseModel):
    expr: ExprAST


class RenderResponse(BaseModel):
    rendered: str


# ─────────────────────────── errors ──────────────────────────────

class EvaluationErrorResponse(BaseModel):
    kind: str  # unknown_identifier | division_by_zero | invalid_exponent
    message: str
    identifier: Optional[str] = None

    @classmethod
    def from_error(cls, exc: EvaluationError) -> EvaluationErrorResponse:
        return cls(
            kind=exc.kind,
            message=exc.message,
            identifier=getattr(exc, "name", None),
        )


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
    constants: list[str]
