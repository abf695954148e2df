import pytest

from pebble.errors import PebbleUnboundSymbol
from pebble.types.environment import Environment
from pebble.types.nil import Nil
from pebble.types.symbol import Symbol


def test_set_and_get_in_same_scope():
    env = Environment()
    env.set("x", 5)
    assert env.get("x") == 5
    assert env.get(Symbol("x")) == 5


def test_get_missing_returns_none():
    env = Environment()
    assert env.get("missing") is None


def test_nil_binding_is_distinct_from_missing():
    env = Environment()
    env.set("n", Nil)
    assert env.get("n") is Nil


def test_child_sees_parent_bindings():
    root = Environment()
    root.set("a", 1)
    child = Environment(outer=root)
    grandchild = Environment(outer=child)
    assert grandchild.get("a") == 1
    assert grandchild.find("a") is root


def test_set_in_child_shadows_without_touching_parent():
    root = Environment()
    root.set("a", 1)
    child = Environment(outer=root)
    child.set("a", 2)
    assert child.get("a") == 2
    assert root.get("a") == 1


def test_child_bindings_do_not_leak_outward():
    root = Environment()
    child = Environment(outer=root)
    child.set("local", 10)
    assert root.get("local") is None


def test_sibling_scopes_are_isolated():
    root = Environment()
    left = Environment(outer=root)
    right = Environment(outer=root)
    left.set("x", 5)
    assert right.get("x") is None
    with pytest.raises(PebbleUnboundSymbol):
        right.lookup("x")


def test_later_set_on_shared_parent_is_visible_to_children():
    root = Environment()
    child = Environment(outer=root)
    assert child.get("late") is None
    root.set("late", 7)
    assert child.get("late") == 7


def test_set_overwrites_and_returns_value():
    env = Environment()
    env.set("x", 1)
    assert env.set("x", 2) == 2
    assert env.lookup("x") == 2


def test_lookup_unbound_message_names_symbol():
    with pytest.raises(PebbleUnboundSymbol, match="nope"):
        Environment().lookup(Symbol("nope"))


def test_update_and_repr():
    root = Environment()
    root.update({"a": 1, "b": 2})
    child = Environment(outer=root)
    child.set("c", 3)
    assert root.is_root and not child.is_root
    assert str(child) == "{c: 3} -> ..."
    assert repr(child) == "<Environment chain: {c: 3} -> {a: 1, b: 2}>"


def test_rest_marker_symbol():
    assert Symbol("&").is_rest_marker
    assert not Symbol("x").is_rest_marker
    assert not Symbol("&rest").is_rest_marker


def test_symbol_is_not_a_string():
    assert Symbol("a") == Symbol("a")
    assert hash(Symbol("a")) == hash(Symbol("a"))
    assert Symbol("a") != "a"
    assert str(Symbol("a")) == "a"
