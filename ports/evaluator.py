"""
Port: Evaluator
Odpowiedzialność: deterministyczne liczenie drzew wyrażeń względem środowiska zmiennych.
"""
from typing import Protocol, runtime_checkable

from contracts import Environment, EvalResult, ExprAST


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(self, expr: ExprAST, env: Environment) -> float:
        """
        Reduces an expression tree to a single float.
        env: variable bindings consulted by VariableNode; never mutated.
        Left operand is fully evaluated before the right one; the first
        failure is raised and the right operand is not evaluated.
        Raises UndefinedVariable, TypeMismatch or UnknownOperator.
        Recursion is bounded by the interpreter limit (sys.getrecursionlimit());
        deeper trees raise ExpressionTooDeep.
        Division by zero follows IEEE-754 (inf / -inf / nan), no exception.
        """
        ...

    def eval_expr(
        self,
        expr: ExprAST,
        env: Environment | None = None,
    ) -> EvalResult:
        """
        Same as evaluate(), but also returns human-readable computation
        steps (variable lookups and each binary operation) in evaluation order.
        """
        ...
