"""
_printer.py — czytelna postać drzew i liczb (kroki ewaluacji, CLI, API).
"""
from __future__ import annotations

import math

from contracts import ConstantNode, ExprAST, OperationNode, VariableNode


def fmt_number(v: float) -> str:
    """3.0 → '3', 2.5 → '2.5', inf → 'inf'."""
    if math.isfinite(v) and v.is_integer():
        return str(int(v))
    return repr(v)


def format_expr(expr: ExprAST) -> str:
    """Postać infiksowa z pełnymi nawiasami, np. '(x * (y + 2))'."""
    if isinstance(expr, ConstantNode):
        return fmt_number(expr.value)
    if isinstance(expr, VariableNode):
        return expr.name
    if isinstance(expr, OperationNode):
        op = getattr(expr.op, "value", expr.op)
        return f"({format_expr(expr.left)} {op} {format_expr(expr.right)})"
    raise TypeError(f"Nieznany typ węzła AST: {type(expr)}")
