import pytest

from mallow.errors import MallowInvalidSymbol, MallowUnboundSymbol
from mallow.types.environment import Environment
from mallow.types.symbol import Symbol

A = Symbol("a")
B = Symbol("b")


def test_set_and_get():
    env = Environment()
    env.set(A, 1)
    assert env.get(A) == 1


def test_get_walks_outward():
    root = Environment()
    root.set(A, 1)
    child = Environment(outer=Environment(outer=root))
    assert child.get(A) == 1
    assert child.find(A) is root


def test_set_only_touches_current_scope():
    root = Environment()
    root.set(A, 1)
    child = Environment(outer=root)
    child.set(A, 2)
    assert child.get(A) == 2
    assert root.get(A) == 1


def test_set_overwrites_in_place():
    env = Environment()
    env.set(A, 1)
    env.set(B, 2)
    env.set(A, 3)
    assert list(env.vars.items()) == [(A, 3), (B, 2)]


def test_remove_only_current_scope():
    root = Environment()
    root.set(A, 1)
    child = Environment(outer=root)
    child.set(A, 2)
    child.remove(A)
    assert child.get(A) == 1
    child.remove(A)  # absent here: no error, outer untouched
    assert root.get(A) == 1


def test_unbound_lookup_names_symbol():
    env = Environment(outer=Environment())
    with pytest.raises(MallowUnboundSymbol, match="'missing' not found"):
        env.get(Symbol("missing"))


def test_set_requires_symbol():
    with pytest.raises(MallowInvalidSymbol):
        Environment().set("a", 1)


def test_shared_scope_mutation_is_visible_to_all_children():
    shared = Environment()
    first = Environment(outer=shared)
    second = Environment(outer=shared)
    shared.set(A, "late")
    assert first.get(A) == "late"
    assert second.get(A) == "late"


def test_update_and_str():
    env = Environment(outer=Environment())
    env.update({A: 1, B: 2})
    assert str(env) == "{a: 1, b: 2} -> ..."
    assert repr(env) == "<Environment chain: {a: 1, b: 2} -> {}>"
