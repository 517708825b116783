"""
Adapter: TreeEvaluator
Implementuje port Evaluator — rekurencyjne przejście ExprAST na float.

evaluate()  — sama wartość
eval_expr() — wartość + kroki obliczeń (odczyty zmiennych i każda operacja)

Kolejność: lewe poddrzewo w całości, potem prawe, potem operator.
Pierwszy błąd przerywa ewaluację; prawe poddrzewo nie jest wtedy liczone.
Dzielenie przez zero wg IEEE-754: inf / -inf / nan zamiast wyjątku.
"""
from __future__ import annotations

import logging
import math

from adapters.evaluator._printer import fmt_number
from adapters.evaluator.environment import lookup_number
from contracts import (
    ConstantNode,
    Environment,
    EvalError,
    EvalResult,
    ExprAST,
    ExpressionTooDeep,
    Operator,
    OperationNode,
    UnknownOperator,
    VariableNode,
)

logger = logging.getLogger("expr_tree.evaluator")


def _ieee_div(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        # znak zera w dzielniku ma znaczenie: 1 / -0.0 → -inf
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


# Operator jest str-enumem, więc surowy symbol "+" trafia w ten sam klucz
_OP_FUNCS = {
    Operator.ADD: lambda a, b: a + b,
    Operator.SUB: lambda a, b: a - b,
    Operator.MUL: lambda a, b: a * b,
    Operator.DIV: _ieee_div,
}


class TreeEvaluator:
    """Ewaluator drzew wyrażeń arytmetycznych; bezstanowy, bezpieczny dla wątków."""

    # -- Evaluator protocol ------------------------------------------------

    def evaluate(self, expr: ExprAST, env: Environment) -> float:
        try:
            return self._eval(expr, env, None)
        except RecursionError:
            logger.debug("Evaluation failed: tree too deep")
            raise ExpressionTooDeep() from None
        except EvalError as exc:
            logger.debug("Evaluation failed: %s", exc)
            raise

    def eval_expr(
        self,
        expr: ExprAST,
        env: Environment | None = None,
    ) -> EvalResult:
        steps: list[str] = []
        try:
            value = self._eval(expr, env if env is not None else {}, steps)
        except RecursionError:
            logger.debug("Evaluation failed after %d steps: tree too deep", len(steps))
            raise ExpressionTooDeep() from None
        except EvalError as exc:
            logger.debug("Evaluation failed after %d steps: %s", len(steps), exc)
            raise
        return EvalResult(value=value, steps=steps)

    # -- Prywatne ----------------------------------------------------------

    def _eval(
        self,
        node: ExprAST,
        env: Environment,
        steps: list[str] | None,
    ) -> float:
        """Zwraca wartość węzła; dopisuje kroki, jeśli steps nie jest None."""

        if isinstance(node, ConstantNode):
            return node.value

        if isinstance(node, VariableNode):
            val = lookup_number(env, node.name)
            if steps is not None:
                steps.append(f"{node.name} = {fmt_number(val)}")
            return val

        if isinstance(node, OperationNode):
            left_val = self._eval(node.left, env, steps)
            right_val = self._eval(node.right, env, steps)

            # model_construct() omija walidację, więc sprawdzamy jeszcze raz
            fn = _OP_FUNCS.get(node.op)
            if fn is None:
                raise UnknownOperator(node.op)

            result = fn(left_val, right_val)
            if steps is not None:
                op_sym = getattr(node.op, "value", node.op)
                steps.append(
                    f"{fmt_number(left_val)} {op_sym} {fmt_number(right_val)} = {fmt_number(result)}"
                )
            return result

        raise TypeError(f"Nieznany typ węzła AST: {type(node)}")
