#!/usr/bin/env python3
"""
exprtree.py — CLI narzędzie ExprTree.

Działa całkowicie lokalnie, nie wymaga uruchomionego serwera API.
Drzewo podaje się w postaci strukturalnej JSON (serializacja węzłów),
nie jako tekst wyrażenia.

Konfiguracja: zmienne środowiskowe z prefiksem EXPR_TREE_ lub plik .env
(np. EXPR_TREE_LOG_LEVEL=DEBUG, EXPR_TREE_TRACE_STEPS=false).

Podkomendy:
    eval   — oblicz drzewo względem zmiennych z --var
    show   — wyświetl drzewo w postaci infiksowej
    demo   — dwa scenariusze referencyjne (zmiana środowiska między ewaluacjami)

Użycie:
    python exprtree.py eval --file tree.json --var x=3 --var y=4
    python exprtree.py eval --tree '{"node_type": "variable", "name": "x"}' --var x=2.5
    python exprtree.py show --file tree.json
    python exprtree.py demo
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.table import Table

from adapters.evaluator._printer import fmt_number, format_expr
from adapters.evaluator.tree_evaluator import TreeEvaluator
from config import Settings
from contracts import EvalError, ExprAST, Operator, constant, load_expr, operation, variable

logger = logging.getLogger("expr_tree.cli")


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(str(key), str(value))
    _console().print(table)


def _print_steps_table(steps: list[str]) -> None:
    table = Table(title=f"Steps [{len(steps)}]", box=box.ASCII)
    table.add_column("#", justify="right", no_wrap=True, style="cyan")
    table.add_column("Step")
    for i, step in enumerate(steps, 1):
        table.add_row(str(i), step)
    _console().print(table)


def _read_tree(args: argparse.Namespace) -> ExprAST:
    if getattr(args, "file", None):
        try:
            raw = open(args.file, encoding="utf-8").read()
        except OSError as e:
            print(f"Błąd odczytu pliku: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        raw = getattr(args, "tree", None) or sys.stdin.read().strip()
    if not raw:
        print("Błąd: podaj drzewo przez --tree, --file lub stdin", file=sys.stderr)
        sys.exit(1)
    try:
        return load_expr(raw)
    except (ValidationError, EvalError) as exc:
        print(f"Błąd: nieprawidłowe drzewo: {exc}", file=sys.stderr)
        sys.exit(1)


def _parse_vars(pairs: list[str]) -> dict[str, str]:
    """NAME=VALUE → {NAME: VALUE}; wartości zostają tekstem, konwersja przy odczycie."""
    env: dict[str, str] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        name = name.strip()
        if not sep or not name:
            print(f"Błąd: oczekiwano NAME=VALUE, otrzymano {pair!r}", file=sys.stderr)
            sys.exit(1)
        env[name] = value.strip()
    return env


# -- podkomendy ------------------------------------------------------------

def _eval(args: argparse.Namespace, settings: Settings) -> None:
    expr = _read_tree(args)
    env = _parse_vars(args.var)
    want_steps = settings.trace_steps if args.steps is None else args.steps

    try:
        result = TreeEvaluator().eval_expr(expr, env)
    except EvalError as exc:
        print(f"Błąd ewaluacji ({type(exc).__name__}): {exc}", file=sys.stderr)
        sys.exit(1)

    _print_kv_table("Evaluation", [
        ("expr", format_expr(expr)),
        ("env", ", ".join(f"{k}={v}" for k, v in env.items()) or "-"),
        ("result", fmt_number(result.value)),
    ])
    if want_steps and result.steps:
        _print_steps_table(result.steps)


def _show(args: argparse.Namespace, settings: Settings) -> None:
    print(format_expr(_read_tree(args)))


def _demo(args: argparse.Namespace, settings: Settings) -> None:
    evaluator = TreeEvaluator()

    # x + 2, potem zmiana x w tym samym środowisku
    e = operation(variable("x"), Operator.ADD, constant(2))
    env: dict[str, Any] = {"x": 3}
    first = evaluator.evaluate(e, env)
    env["x"] = 5
    second = evaluator.evaluate(e, env)
    _print_kv_table(format_expr(e), [
        ("x=3", fmt_number(first)),
        ("x=5", fmt_number(second)),
    ])

    # x * (y + 2), dwa różne środowiska
    en = operation(
        variable("x"),
        Operator.MUL,
        operation(variable("y"), Operator.ADD, constant(2)),
    )
    envs = [{"x": 3, "y": 4}, {"x": 2, "y": 5}]
    _print_kv_table(format_expr(en), [
        (", ".join(f"{k}={v}" for k, v in vs.items()), fmt_number(evaluator.evaluate(en, vs)))
        for vs in envs
    ])


# -- main ------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="exprtree",
        description="ExprTree — CLI (lokalny, bez serwera API)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # eval
    p = sub.add_parser("eval", help="Oblicz drzewo wyrażenia")
    p.add_argument("--tree", "-t", help="Drzewo jako JSON")
    p.add_argument("--file", "-f", help="Ścieżka do pliku JSON z drzewem")
    p.add_argument("--var", "-v", action="append", default=[], metavar="NAME=VALUE",
                   help="Zmienna środowiska (można powtarzać)")
    p.add_argument("--steps", action=argparse.BooleanOptionalAction, default=None,
                   help="Pokaż kroki obliczeń")

    # show
    p = sub.add_parser("show", help="Wyświetl drzewo w postaci infiksowej")
    p.add_argument("--tree", "-t", help="Drzewo jako JSON")
    p.add_argument("--file", "-f", help="Ścieżka do pliku JSON z drzewem")

    # demo
    sub.add_parser("demo", help="Scenariusze referencyjne")

    args = parser.parse_args(argv)

    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    cmds = {
        "eval": _eval,
        "show": _show,
        "demo": _demo,
    }
    logger.debug("Running command %s", args.command)
    cmds[args.command](args, settings)


if __name__ == "__main__":
    main()
