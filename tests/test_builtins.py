import pytest

from pebble.builtin.env_builtin import PRIMITIVES, create_root_env
from pebble.errors import PebbleArityError
from pebble.evaluation.special_forms import SPECIAL_FORMS
from pebble.types.callables import Primitive, SpecialForm
from pebble.types.nil import Nil
from pebble.types.seq import List


def test_root_env_holds_every_builtin(env):
    assert env.is_root
    for p in PRIMITIVES:
        assert env.lookup(p.name) is p
    for name in SPECIAL_FORMS:
        assert isinstance(env.lookup(name), SpecialForm)


def test_root_envs_are_independent():
    a = create_root_env()
    b = create_root_env()
    a.set("x", 1)
    assert b.get("x") is None


def test_primitive_called_directly(env):
    add = env.lookup("+")
    assert isinstance(add, Primitive)
    assert add.fn([2, 3]) == 5


# ------------------ equality ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", True),
        ("(= 1 2)", False),
        ('(= "a" "a")', True),
        ("(= nil nil)", True),
        ("(= nil false)", False),
        ("(= true 1)", False),
        ("(= false 0)", False),
        ("(= (list 1 2) [1 2])", True),
        ("(= [1 2] (list 1 2))", True),
        ("(= (list 1 2) (list 1 2 3))", False),
        ("(= (list 1 (list 2 3)) [1 [2 3]])", True),
        ("(= (list true) (list 1))", False),
        ("(= {1 2} {1 2})", True),
        ("(= {1 2} [1 2])", False),
        ("(= () [])", True),
        ("(= + +)", True),
        ("(= + -)", False),
        ("(= (fn* (a) a) (fn* (a) a))", True),
        ("(= (fn* (a) a) (fn* (b) b))", False),
        ("(= (fn* (a & r) a) (fn* (a) a))", False),
    ],
)
def test_equality(run, source, expected):
    assert run(source) is expected


def test_closures_equal_across_scopes(run):
    source = """
    (def! a (let* (x 1) (fn* (y) y)))
    (def! b (let* (x 2) (fn* (y) y)))
    (= a b)
    """
    assert run(source) is True


# ------------------ lists ------------------

def test_list_builds_round_list(run):
    result = run("(list 1 (+ 1 1) 3)")
    assert type(result) is List
    assert result == [1, 2, 3]


def test_list_no_args(run):
    assert run("(list)") == []


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(list? (list))", True),
        ("(list? (list 1 2))", True),
        ("(list? ())", True),
        ("(list? [1 2])", False),
        ("(list? {1 2})", False),
        ("(list? nil)", False),
        ('(list? "abc")', False),
        ("(list? 1)", False),
    ],
)
def test_list_predicate(run, source, expected):
    assert run(source) is expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(empty? (list))", True),
        ("(empty? [])", True),
        ('(empty? "")', True),
        ("(empty? (list 1))", False),
        ("(empty? [1])", False),
        ('(empty? "a")', False),
        ("(empty? nil)", False),
        ("(empty? 0)", False),
        ("(empty? true)", False),
        ("(empty? {})", False),
        ("(empty? {1 2})", False),
    ],
)
def test_empty_predicate(run, source, expected):
    assert run(source) is expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(count (list 1 2 3))", 3),
        ("(count [1 2])", 2),
        ("(count (list))", 0),
        ('(count "hello")', 5),
        ("(count nil)", 0),
    ],
)
def test_count(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source", ["(count 5)", "(count true)", "(count +)", "(count {1 2})", "(count {})"]
)
def test_count_non_collection_is_nil(run, source):
    assert run(source) is Nil


@pytest.mark.parametrize(
    "source",
    ["(count)", "(count 1 2)", "(empty?)", "(list? 1 2)", "(= 1)", "(= 1 1 1)"],
)
def test_single_arity_builtins(run, source):
    with pytest.raises(PebbleArityError):
        run(source)
