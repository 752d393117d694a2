import dataclasses

import pytest

from hyoka.errors import HyokaInvalidSymbol, HyokaTypeError
from hyoka.types.environment import Environment
from hyoka.types.expression import List, Number, Procedure
from hyoka.types.symbol import Symbol


def test_new_empty_is_unbound():
    env = Environment.new_empty()
    assert len(env) == 0
    assert env.get(Symbol("x")) is None


def test_new_empty_returns_independent_frames():
    a = Environment.new_empty()
    b = Environment.new_empty()
    a.set(Symbol("x"), Number(1))
    assert Symbol("x") not in b


def test_set_and_get(env):
    env.set(Symbol("x"), Number(1))
    assert env.get(Symbol("x")) == Number(1)
    assert Symbol("x") in env


def test_set_overwrites(env):
    env.set(Symbol("x"), Number(1))
    env.set(Symbol("x"), Symbol("y"))
    assert env.get(Symbol("x")) == Symbol("y")
    assert len(env) == 1


def test_get_returns_shared_value(env):
    body = List.of(Symbol("+"), Symbol("a"))
    env.set(Symbol("l"), body)
    assert env.get(Symbol("l")) is body


def test_set_rejects_non_symbol_names(env):
    with pytest.raises(HyokaInvalidSymbol):
        env.set("x", Number(1))


def test_set_rejects_no_value(env):
    with pytest.raises(HyokaTypeError):
        env.set(Symbol("x"), None)


def test_constructor_bindings_and_iteration():
    env = Environment({Symbol("a"): Number(1), Symbol("b"): Number(2)})
    assert set(env) == {Symbol("a"), Symbol("b")}


def test_str():
    env = Environment({Symbol("a"): Number(1)})
    assert str(env) == "{a: 1.0}"
    assert repr(env) == "<Environment {a: 1.0}>"

# ------------------ expression types ------------------

def test_symbol_equality_and_hash():
    assert Symbol("x") == Symbol("x")
    assert Symbol("x") != Symbol("y")
    assert Symbol("x") != "x"
    assert hash(Symbol("x")) == hash(Symbol("x"))
    assert repr(Symbol("x")) == "Symbol('x')"


def test_symbol_is_immutable():
    with pytest.raises(AttributeError):
        Symbol("x").name = "y"


def test_number_is_float_and_frozen():
    n = Number(5)
    assert isinstance(n.value, float)
    assert n == Number(5.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        n.value = 6.0


def test_list_stores_tuple():
    items = [Number(1), Symbol("a")]
    lst = List(items)
    items.append(Number(2))
    assert lst.items == (Number(1), Symbol("a"))
    assert len(lst) == 2
    assert lst[1] == Symbol("a")


@pytest.mark.parametrize(
    "expr,text",
    [
        (Number(5), "5.0"),
        (Number(-0.5), "-0.5"),
        (Symbol("foo"), "foo"),
        (List(), "()"),
        (List.of(Symbol("+"), Number(1), List.of(Symbol("x"))), "(+ 1.0 (x))"),
        (Procedure((Symbol("a"),), (Symbol("+"), Symbol("a"))), "(lambda (a) (+ a))"),
        (Procedure((), (Symbol("+"),)), "(lambda () (+))"),
    ]
)
def test_render(expr, text):
    assert str(expr) == text


def test_expressions_are_hashable():
    exprs = {Number(1), Symbol("a"), List.of(Number(1)), Procedure((), (Number(1),))}
    assert len(exprs) == 4
