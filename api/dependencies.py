"""
dependencies.py — FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni obiekt przez Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from adapters.evaluator.tree_evaluator import TreeEvaluator
from config import Settings


def get_evaluator(request: Request) -> TreeEvaluator:
    return request.app.state.evaluator


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
