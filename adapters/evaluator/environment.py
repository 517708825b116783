"""
environment.py — granica środowiska: odczyt zmiennej i konwersja do float.

Środowisko może przechowywać wartości z różnych źródeł (int, float, Fraction,
Decimal, tekst z CLI). Konwersja odbywa się tu, raz, przy odczycie;
ewaluator operuje wyłącznie na float.
"""
from __future__ import annotations

import math
from typing import Any

from contracts import Environment, TypeMismatch, UndefinedVariable


def to_number(name: str, raw: Any) -> float:
    """
    Konwertuje wartość zmiennej do float albo zgłasza TypeMismatch.
    Liczby spoza zakresu float (np. 10**400) → ±inf.
    """
    if isinstance(raw, float):
        return raw
    try:
        return float(raw)
    except OverflowError:
        return math.inf if raw > 0 else -math.inf
    except (TypeError, ValueError):
        raise TypeMismatch(name, raw) from None


def lookup_number(env: Environment, name: str) -> float:
    """
    Odczytuje zmienną ze środowiska.
    Brak klucza lub wartość None → UndefinedVariable.
    """
    # `in` przed odczytem: defaultdict/Counter nie mogą podstawić ani dopisać wartości
    if name not in env:
        raise UndefinedVariable(name)
    raw = env[name]
    if raw is None:
        raise UndefinedVariable(name)
    return to_number(name, raw)
