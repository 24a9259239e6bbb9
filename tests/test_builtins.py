import pytest

from mallow.builtin import env_builtin
from mallow.errors import MallowArityError, MallowTypeError
from mallow.evaluation.evaluator import evaluate
from mallow.reader.parser import read_str
from mallow.types.function import Function
from mallow.types.nil import Nil
from mallow.types.symbol import Symbol


def run(source, env):
    return evaluate(read_str(source), env)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", 3),
        ("(+ 1 2.0)", 3.0),
        ("(+ 1.5 2)", 3.5),
        ("(- 10 4)", 6),
        ("(- 4 10)", -6),
        ("(* 3 4)", 12),
        ("(* 2 1.5)", 3.0),
        ("(/ 12 3)", 4),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(/ 7 -2)", -3),
        ("(/ 7.0 2)", 3.5),
        ("(/ 1 2.0)", 0.5),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(< 1 2)", True),
        ("(< 2 1)", False),
        ("(<= 2 2)", True),
        ("(> 1 2)", False),
        ("(>= 3 2)", True),
        ("(>= 1 2.5)", False),
        ("(< 1.5 2)", True),
    ]
)
def test_arithmetic_and_comparison(env, source, expected):
    result = run(source, env)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", True),
        ("(= 1 2)", False),
        ("(= 1 1.0)", False),
        ("(= (list) [])", True),
        ("(= (list 1) (list 1 2))", False),
        ('(= "a" "a")', True),
        ('(= "a" :a)', False),
        ("(= :a :a)", True),
        ("(= nil nil)", True),
        ("(= nil false)", False),
        ("(= nil (list))", False),
        ("(= true 1)", False),
        ("(= {:a 1 :b 2} {:b 2 :a 1})", True),
        ("(= {:a 1} {:a 2})", False),
    ]
)
def test_equality(env, source, expected):
    assert run(source, env) is expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(list 1 2)", [1, 2]),
        ("(list)", []),
        ("(list? (list 1))", True),
        ("(list? (list))", True),
        ("(list? [])", False),
        ("(list? 1)", False),
        ("(empty? (list))", True),
        ("(empty? [])", True),
        ("(empty? (list 1))", False),
        ("(empty? nil)", False),
        ("(count (list 1 2 3))", 3),
        ("(count (list))", 0),
        ("(count nil)", 0),
        ("(count 5)", 0),
    ]
)
def test_list_primitives(env, source, expected):
    result = run(source, env)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "source,expected",
    [
        ('(pr-str "a" 1 :k)', '"a" 1 :k'),
        ('(pr-str "a\\nb")', '"a\\nb"'),
        ("(pr-str)", ""),
        ('(pr-str (list 1 "x"))', '(1 "x")'),
        ('(str "a" 1 :k)', "a1:k"),
        ('(str "a\\nb")', "a\nb"),
        ("(str)", ""),
        ('(str (list 1 "x") [])', "(1 x)[]"),
    ]
)
def test_string_primitives(env, source, expected):
    assert run(source, env) == expected


def test_prn_prints_readably(env, capsys):
    assert run('(prn "a" 1 (list "b"))', env) is Nil
    assert capsys.readouterr().out == '"a" 1 ("b")\n'


def test_println_prints_raw(env, capsys):
    assert run('(println "a" "b\\nc" :k)', env) is Nil
    assert capsys.readouterr().out == "a b\nc :k\n"


@pytest.mark.parametrize(
    "source,error",
    [
        ("(+ 1)", MallowArityError),
        ("(+ 1 2 3)", MallowArityError),
        ("(= 1)", MallowArityError),
        ("(< 1 2 3)", MallowArityError),
        ('(+ 1 "a")', MallowTypeError),
        ("(+ true 1)", MallowTypeError),
        ("(- nil 1)", MallowTypeError),
        ("(< 1 nil)", MallowTypeError),
        ("(/ 1 0)", MallowTypeError),
        ("(/ 1.0 0.0)", MallowTypeError),
    ]
)
def test_primitive_errors(env, source, error):
    with pytest.raises(error):
        run(source, env)


def test_type_error_names_operands(env):
    with pytest.raises(MallowTypeError, match='between 1 and "a"'):
        run('(+ 1 "a")', env)


def test_register_installs_named_functions(env):
    for name in env_builtin.BUILTINS:
        fn = env.get(Symbol(name))
        assert isinstance(fn, Function)
        assert fn.name == name


def test_builtin_called_directly(env):
    add = env.get(Symbol("+"))
    assert add(env, [2, 3]) == 5
