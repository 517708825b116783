from __future__ import annotations

import json

import pytest

import exprtree

_TREE = json.dumps({
    "node_type": "operation",
    "op": "+",
    "left": {"node_type": "variable", "name": "x"},
    "right": {"node_type": "constant", "value": 2},
})


def test_cli_eval_prints_result(capsys):
    exprtree.main(["eval", "--tree", _TREE, "--var", "x=3", "--no-steps"])

    out = capsys.readouterr().out
    assert "(x + 2)" in out
    assert "5" in out
    assert "Steps" not in out


def test_cli_eval_prints_steps(capsys):
    exprtree.main(["eval", "--tree", _TREE, "--var", "x=2.5", "--steps"])

    out = capsys.readouterr().out
    assert "4.5" in out
    assert "x = 2.5" in out


def test_cli_eval_reads_file(tmp_path, capsys):
    path = tmp_path / "tree.json"
    path.write_text(_TREE, encoding="utf-8")

    exprtree.main(["eval", "--file", str(path), "--var", "x=5", "--no-steps"])

    assert "7" in capsys.readouterr().out


def test_cli_eval_undefined_variable_exits_1(capsys):
    with pytest.raises(SystemExit) as exc_info:
        exprtree.main(["eval", "--tree", _TREE])

    assert exc_info.value.code == 1
    assert "UndefinedVariable" in capsys.readouterr().err


def test_cli_eval_rejects_malformed_var(capsys):
    with pytest.raises(SystemExit) as exc_info:
        exprtree.main(["eval", "--tree", _TREE, "--var", "x"])

    assert exc_info.value.code == 1
    assert "NAME=VALUE" in capsys.readouterr().err


def test_cli_eval_rejects_invalid_tree(capsys):
    with pytest.raises(SystemExit) as exc_info:
        exprtree.main(["eval", "--tree", '{"node_type": "call"}'])

    assert exc_info.value.code == 1


def test_cli_show_prints_infix(capsys):
    exprtree.main(["show", "--tree", _TREE])

    assert capsys.readouterr().out.strip() == "(x + 2)"


def test_cli_demo_runs_reference_scenarios(capsys):
    exprtree.main(["demo"])

    out = capsys.readouterr().out
    assert "(x + 2)" in out
    assert "(x * (y + 2))" in out
    for expected in ("5", "7", "18", "14"):
        assert expected in out
