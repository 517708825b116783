"""
schemas.py — Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field

from contracts import ExprAST


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(BaseModel):
    expr: ExprAST
    env: dict[str, Any] = Field(default_factory=dict)
    steps: bool | None = None   # None → Settings.trace_steps


class EvaluateResponse(BaseModel):
    value: Union[float, str]    # "inf" / "-inf" / "nan" — JSON nie ma takich liczb
    expr: str                   # postać infiksowa drzewa
    steps: list[str] = Field(default_factory=list)


class EvalErrorResponse(BaseModel):
    error: str                  # UndefinedVariable | TypeMismatch | UnknownOperator | ExpressionTooDeep
    detail: str


# ─────────────────────────── /format ─────────────────────────────

class FormatRequest(BaseModel):
    expr: ExprAST


class FormatResponse(BaseModel):
    expr: str


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
