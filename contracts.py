"""
contracts.py — Jedyne źródło prawdy dla typów danych w ExprTree.
Wszystkie moduły importują WYŁĄCZNIE stąd. Nie modyfikować bez versioning.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

CONTRACTS_VERSION = "1.0.0"

# Środowisko: nazwa zmiennej → wartość (liczbowa lub konwertowalna do liczby)
Environment = Mapping[str, Any]


# ─────────────────────────── Errors ──────────────────────────────────────

class EvalError(Exception):
    """Bazowy błąd ewaluacji drzewa wyrażenia."""


class UndefinedVariable(EvalError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Niezwiązana zmienna: {name!r}")


class TypeMismatch(EvalError):
    def __init__(self, name: str, value: Any) -> None:
        self.name = name
        self.value = value
        super().__init__(
            f"Wartość zmiennej {name!r} nie jest liczbą: {value!r} ({type(value).__name__})"
        )


class UnknownOperator(EvalError):
    def __init__(self, symbol: Any) -> None:
        self.symbol = symbol
        super().__init__(f"Nieznany operator: {symbol!r}")


class ExpressionTooDeep(EvalError):
    """Drzewo głębsze niż limit rekursji interpretera."""

    def __init__(self) -> None:
        super().__init__("Drzewo wyrażenia jest zbyt głębokie")


# ─────────────────────────── Operators ───────────────────────────────────

class Operator(str, Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @classmethod
    def from_symbol(cls, symbol: Any) -> "Operator":
        """Zwraca operator dla symbolu; inny symbol → UnknownOperator."""
        try:
            return cls(symbol)
        except ValueError:
            raise UnknownOperator(symbol) from None


# ─────────────────────────── Expression AST ──────────────────────────────

class ConstantNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["constant"] = "constant"
    value: float


class VariableNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["variable"] = "variable"
    name: str


class OperationNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["operation"] = "operation"
    op: Operator
    left: "ExprAST"
    right: "ExprAST"

    # UnknownOperator nie dziedziczy po ValueError, więc pydantic go nie opakowuje
    @field_validator("op", mode="before")
    @classmethod
    def known_operator(cls, v: Any) -> Operator:
        return Operator.from_symbol(v)


ExprAST = Annotated[
    Union[ConstantNode, VariableNode, OperationNode],
    Field(discriminator="node_type"),
]
OperationNode.model_rebuild()

_EXPR_ADAPTER: TypeAdapter[ExprAST] = TypeAdapter(ExprAST)


def constant(value: float) -> ConstantNode:
    return ConstantNode(value=value)


def variable(name: str) -> VariableNode:
    return VariableNode(name=name)


def operation(left: ExprAST, op: Operator | str, right: ExprAST) -> OperationNode:
    """Buduje węzeł operacji w kolejności (lewy, operator, prawy)."""
    return OperationNode(op=op, left=left, right=right)


def load_expr(data: str | bytes | dict[str, Any]) -> ExprAST:
    """
    Wczytuje drzewo z postaci strukturalnej (dict lub tekst JSON).
    To nie jest parser wyrażeń tekstowych: format to serializacja węzłów.
    """
    if isinstance(data, (str, bytes)):
        return _EXPR_ADAPTER.validate_json(data)
    return _EXPR_ADAPTER.validate_python(data)


def dump_expr(expr: ExprAST) -> dict[str, Any]:
    return _EXPR_ADAPTER.dump_python(expr, mode="json")


# ─────────────────────────── Evaluator ───────────────────────────────────

class EvalResult(BaseModel):
    value: float
    steps: list[str] = Field(default_factory=list)  # czytelne kroki, od lewej
