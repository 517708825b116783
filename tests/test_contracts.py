from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from contracts import (
    ConstantNode,
    Operator,
    OperationNode,
    UnknownOperator,
    VariableNode,
    constant,
    dump_expr,
    load_expr,
    operation,
    variable,
)


def test_builders_produce_typed_nodes():
    tree = operation(variable("x"), "+", constant(2))

    assert isinstance(tree, OperationNode)
    assert tree.op is Operator.ADD
    assert tree.left == VariableNode(name="x")
    assert tree.right == ConstantNode(value=2.0)


def test_constant_widens_int_to_float():
    assert isinstance(constant(3).value, float)


def test_nodes_are_frozen():
    node = constant(1)

    with pytest.raises(ValidationError):
        node.value = 2.0

    tree = operation(constant(1), "+", constant(2))
    with pytest.raises(ValidationError):
        tree.left = constant(5)


def test_unknown_operator_rejected_at_construction():
    with pytest.raises(UnknownOperator) as exc_info:
        operation(constant(1), "%", constant(2))

    assert exc_info.value.symbol == "%"


def test_operator_from_symbol_accepts_only_four_symbols():
    assert [Operator.from_symbol(s) for s in "+-*/"] == [
        Operator.ADD, Operator.SUB, Operator.MUL, Operator.DIV,
    ]
    with pytest.raises(UnknownOperator):
        Operator.from_symbol("×")


def test_load_expr_reads_structural_json():
    raw = json.dumps({
        "node_type": "operation",
        "op": "*",
        "left": {"node_type": "variable", "name": "x"},
        "right": {
            "node_type": "operation",
            "op": "+",
            "left": {"node_type": "variable", "name": "y"},
            "right": {"node_type": "constant", "value": 2},
        },
    })

    tree = load_expr(raw)

    assert tree == operation(variable("x"), "*", operation(variable("y"), "+", constant(2)))
    assert load_expr(dump_expr(tree)) == tree


def test_load_expr_rejects_unknown_node_type():
    with pytest.raises(ValidationError):
        load_expr({"node_type": "call", "name": "f"})


def test_load_expr_rejects_unknown_operator():
    with pytest.raises(UnknownOperator):
        load_expr({
            "node_type": "operation",
            "op": "%",
            "left": {"node_type": "constant", "value": 1},
            "right": {"node_type": "constant", "value": 2},
        })
