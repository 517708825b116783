"""
Router: POST /evaluate, POST /format

Ewaluuje drzewo przesłane w postaci strukturalnej (JSON węzłów)
względem środowiska zmiennych z body.
Błędy ewaluacji (EvalError) obsługuje globalny handler w api/main.py → 422.
"""
from __future__ import annotations

import math

from fastapi import APIRouter, Depends

from adapters.evaluator._printer import format_expr
from adapters.evaluator.tree_evaluator import TreeEvaluator
from api.dependencies import get_evaluator, get_settings
from api.schemas import (
    EvaluateRequest,
    EvaluateResponse,
    EvalErrorResponse,
    FormatRequest,
    FormatResponse,
)
from config import Settings

router = APIRouter(tags=["evaluate"])


def _json_value(v: float) -> float | str:
    return v if math.isfinite(v) else repr(v)


@router.post(
    "/evaluate",
    response_model=EvaluateResponse,
    responses={422: {"model": EvalErrorResponse}},
)
async def evaluate(
    body: EvaluateRequest,
    evaluator: TreeEvaluator = Depends(get_evaluator),
    settings: Settings = Depends(get_settings),
) -> EvaluateResponse:
    want_steps = settings.trace_steps if body.steps is None else body.steps

    if want_steps:
        result = evaluator.eval_expr(body.expr, body.env)
        value, steps = result.value, result.steps
    else:
        value, steps = evaluator.evaluate(body.expr, body.env), []

    return EvaluateResponse(
        value=_json_value(value),
        expr=format_expr(body.expr),
        steps=steps,
    )


@router.post("/format", response_model=FormatResponse)
async def format_tree(body: FormatRequest) -> FormatResponse:
    return FormatResponse(expr=format_expr(body.expr))
