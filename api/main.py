"""
api/main.py — punkt wejścia FastAPI.

Lifespan:
  - Tworzy jeden bezstanowy TreeEvaluator współdzielony przez wszystkie żądania

Błędy ewaluacji (UndefinedVariable, TypeMismatch, UnknownOperator) → 422
z nazwą klasy błędu w polu "error".
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.evaluator.tree_evaluator import TreeEvaluator
from api.routers import evaluate
from api.schemas import HealthResponse
from config import Settings
from contracts import EvalError

logger = logging.getLogger("expr_tree")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Evaluator bezstanowy — tworzony raz
    app.state.evaluator = TreeEvaluator()
    logger.info("ExprTree API ready.")
    yield
    logger.info("Shutting down.")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(evaluate.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(status="ok", version=settings.app_version)

    # Globalny handler błędów ewaluacji
    @app.exception_handler(EvalError)
    async def eval_error_handler(request: Request, exc: EvalError):
        logger.info("Evaluation rejected: %s", exc)
        return JSONResponse(
            status_code=422,
            content={"error": type(exc).__name__, "detail": str(exc)},
        )

    return app


app = create_app()
