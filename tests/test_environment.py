from __future__ import annotations

import math
from collections import Counter, defaultdict
from decimal import Decimal
from fractions import Fraction

import pytest

from adapters.evaluator.environment import lookup_number, to_number
from contracts import TypeMismatch, UndefinedVariable


def test_lookup_number_widens_int():
    value = lookup_number({"x": 3}, "x")

    assert value == 3.0
    assert isinstance(value, float)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (2.5, 2.5),
        (True, 1.0),
        (Fraction(1, 4), 0.25),
        (Decimal("1.5"), 1.5),
        ("3.5", 3.5),
        (" 7 ", 7.0),
    ],
)
def test_to_number_accepts_numeric_like_values(raw, expected):
    assert to_number("x", raw) == expected


@pytest.mark.parametrize("raw", ["abc", "", [1], {"a": 1}, object(), 1 + 2j])
def test_to_number_rejects_non_numeric(raw):
    with pytest.raises(TypeMismatch) as exc_info:
        to_number("x", raw)

    assert exc_info.value.name == "x"
    assert exc_info.value.value is raw


def test_lookup_number_missing_name():
    with pytest.raises(UndefinedVariable) as exc_info:
        lookup_number({"y": 1}, "x")

    assert exc_info.value.name == "x"


def test_lookup_number_none_binding_is_undefined():
    with pytest.raises(UndefinedVariable):
        lookup_number({"x": None}, "x")


def test_lookup_number_does_not_mutate_env():
    env = {"x": "4"}

    lookup_number(env, "x")

    assert env == {"x": "4"}


def test_lookup_number_defaultdict_missing_name_is_undefined():
    env = defaultdict(int)

    with pytest.raises(UndefinedVariable):
        lookup_number(env, "x")

    assert dict(env) == {}


def test_lookup_number_counter_missing_name_is_undefined():
    with pytest.raises(UndefinedVariable):
        lookup_number(Counter(y=2), "x")


def test_to_number_out_of_range_int_becomes_infinity():
    assert to_number("x", 10**400) == math.inf
    assert to_number("x", -(10**400)) == -math.inf
