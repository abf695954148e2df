import pytest

from pebble.builtin.env_builtin import create_root_env
from pebble.printer import escape_string, pr_str
from pebble.types.callables import Closure
from pebble.types.environment import Environment
from pebble.types.nil import Nil, EndOfInput
from pebble.types.seq import List, Vector, HashMap
from pebble.types.symbol import Symbol


@pytest.mark.parametrize(
    "value,readable,display",
    [
        (Nil, "nil", "nil"),
        (True, "true", "true"),
        (False, "false", "false"),
        (42, "42", "42"),
        (-7, "-7", "-7"),
        (Symbol("abc"), "abc", "abc"),
        ("hi", '"hi"', "hi"),
        ('say "x"', '"say \\"x\\""', 'say "x"'),
        ("a\nb", '"a\\nb"', "a\nb"),
        ("tab\there", '"tab\\there"', "tab\there"),
        ("cr\r", '"cr\\r"', "cr\r"),
        ("back\\slash", '"back\\\\slash"', "back\\slash"),
        (List([1, "a", Symbol("b")]), '(1 "a" b)', "(1 a b)"),
        (Vector([1, Vector([2])]), "[1 [2]]", "[1 [2]]"),
        (HashMap(["k", 1]), '{"k" 1}', "{k 1}"),
        (List(), "()", "()"),
        (EndOfInput, "", ""),
    ],
)
def test_pr_str(value, readable, display):
    assert pr_str(value, True) == readable
    assert pr_str(value, False) == display


def test_escape_string():
    assert escape_string('\\"\n\r\t') == '\\\\\\"\\n\\r\\t'


def test_callables_render_as_placeholders():
    env = create_root_env()
    assert pr_str(env.lookup("+")) == "<#builtin function>"
    assert pr_str(env.lookup("if")) == "<#special form>"
    assert pr_str(Closure(["a"], None, [Symbol("a")], Environment())) == "<#function>"


def test_pr_str_builtin_is_readable_and_space_separated(run):
    assert run('(pr-str "a" 1 (list "b"))') == '"a" 1 ("b")'


def test_pr_str_no_args(run):
    assert run("(pr-str)") == ""


def test_str_builtin_is_raw_and_unseparated(run):
    assert run('(str "a" 1 (list "b") nil)') == 'a1(b)nil'


def test_prn_outputs_readable_and_returns_nil(run, capsys):
    ret = run('(prn "alpha" 42 (list "b"))')
    assert capsys.readouterr().out == '"alpha" 42 ("b")\n'
    assert ret is Nil


def test_println_outputs_raw_and_returns_nil(run, capsys):
    ret = run('(println "alpha" 42 "line\\nbreak")')
    assert capsys.readouterr().out == "alpha 42 line\nbreak\n"
    assert ret is Nil


def test_prn_no_args_prints_blank_line(run, capsys):
    run("(prn)")
    assert capsys.readouterr().out == "\n"
