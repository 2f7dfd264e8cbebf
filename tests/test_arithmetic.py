import pytest

from mal.errors import MalArityError, MalTypeError, MalDivisionByZero
from mal.evaluation.evaluator import evaluate
from mal.reader.parser import read_str


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", 3),
        ("(+ 5 (* 2 3))", 11),
        ("(- (+ 5 (* 2 3)) 3)", 8),
        ("(/ (- (+ 5 (* 2 3)) 3) 4)", 2),
        ("(/ (- (+ 515 (* 87 311)) 302) 27)", 1010),
        ("(* -3 6)", -18),
        ("(/ (- (+ 515 (* -87 311)) 296) 27)", -994),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(/ 7 -2)", -3),
        ("(/ -7 -2)", 3),
        ("(- 3 10)", -7),
    ]
)
def test_integer_arithmetic(env, source, expected):
    assert evaluate(read_str(source), env) == expected


def test_division_by_zero(env):
    with pytest.raises(MalDivisionByZero):
        evaluate(read_str("(/ 1 0)"), env)


@pytest.mark.parametrize("source", ["(+ 1)", "(+ 1 2 3)", "(*)", "(- 1 2 3)"])
def test_arithmetic_needs_two_arguments(env, source):
    with pytest.raises(MalArityError):
        evaluate(read_str(source), env)


@pytest.mark.parametrize("source", ['(+ 1 "2")', "(* true 2)", "(- nil 1)", "(/ (list) 1)", "(+ :a 1)"])
def test_arithmetic_needs_integers(env, source):
    with pytest.raises(MalTypeError):
        evaluate(read_str(source), env)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(< 81 94)", True),
        ("(< 94 81)", False),
        ("(<= 1 2)", True),
        ("(<= 2 2)", True),
        ("(> 3 2)", True),
        ("(> 2 2)", False),
        ("(>= 1 1)", True),
        ("(>= 1 2)", False),
    ]
)
def test_comparison(env, source, expected):
    assert evaluate(read_str(source), env) is expected


@pytest.mark.parametrize("source", ['(< 1 "2")', "(> nil 1)", "(<= true false)"])
def test_comparison_rejects_non_integers(env, source):
    with pytest.raises(MalTypeError):
        evaluate(read_str(source), env)
