import pytest

from mal import runtime_context
from mal.errors import MalArityError, MalRecursionError, MalSymbolNotFound
from mal.types.environment import Environment


def test_closure_outlives_defining_call(interp):
    interp.eval("(def! gen-plus5 (fn* () (fn* (b) (+ 5 b))))")
    interp.eval("(def! plus5 (gen-plus5))")
    assert interp.rep("(plus5 7)") == "12"


def test_several_forms_on_one_line(interp):
    source = "(def! gen (fn* () (fn* (b) (+ 5 b)))) (def! f (gen)) (f 7)"
    assert interp.rep(source) == "12"


def test_captured_argument_survives(interp):
    interp.eval("(def! adder (fn* (a) (fn* (b) (+ a b))))")
    interp.eval("(def! add3 (adder 3))")
    interp.eval("(def! add10 (adder 10))")
    assert interp.rep("(add3 1)") == "4"
    assert interp.rep("(add10 1)") == "11"


def test_closures_share_one_captured_scope(interp):
    interp.eval(
        "(def! pair (let* (secret 41) (list (fn* () secret) (fn* (x) (+ x secret)))))"
    )
    first, second = interp.env.get("pair")
    assert first.env is second.env
    assert isinstance(first.env, Environment)
    assert first.env.outer is interp.env


def test_global_redefinition_visible_to_closure(interp):
    interp.eval("(def! k 1)")
    interp.eval("(def! get-k (fn* () k))")
    interp.eval("(def! k 2)")
    assert interp.rep("(get-k)") == "2"


def test_call_scope_is_discarded(interp):
    interp.eval("(def! f (fn* (local) local))")
    assert interp.rep("(f 5)") == "5"
    with pytest.raises(MalSymbolNotFound):
        interp.eval("local")


def test_recursive_functions(interp):
    interp.eval("(def! sumdown (fn* (N) (if (> N 0) (+ N (sumdown (- N 1))) 0)))")
    assert interp.rep("(sumdown 6)") == "21"

    interp.eval("(def! fib (fn* (N) (if (= N 0) 1 (if (= N 1) 1 (+ (fib (- N 1)) (fib (- N 2)))))))")
    assert interp.rep("(fib 4)") == "5"

    interp.eval("(def! sum2 (fn* (n acc) (if (= n 0) acc (sum2 (- n 1) (+ n acc)))))")
    assert interp.rep("(sum2 10 0)") == "55"


def test_mutual_recursion(interp):
    interp.eval("(def! foo (fn* (n) (if (= n 0) 0 (bar (- n 1)))))")
    interp.eval("(def! bar (fn* (n) (if (= n 0) 0 (foo (- n 1)))))")
    assert interp.rep("(foo 20)") == "0"


@pytest.mark.parametrize("call", ["(f)", "(f 1)", "(f 1 2 3)"])
def test_closure_arity_mismatch(interp, call):
    interp.eval("(def! f (fn* (a b) (+ a b)))")
    with pytest.raises(MalArityError):
        interp.eval(call)


def test_deep_recursion_is_reported(interp):
    runtime_context.set_max_call_depth(10)
    interp.eval("(def! down (fn* (n) (if (= n 0) 0 (down (- n 1)))))")
    assert interp.rep("(down 9)") == "0"
    with pytest.raises(MalRecursionError):
        interp.eval("(down 50)")
    assert runtime_context.get_call_depth() == 0
    # the session is still usable afterwards
    assert interp.rep("(down 3)") == "0"


def test_depth_limit_from_environment(interp, monkeypatch):
    monkeypatch.setenv("MAL_MAX_CALL_DEPTH", "5")
    interp.eval("(def! down (fn* (n) (if (= n 0) 0 (down (- n 1)))))")
    with pytest.raises(MalRecursionError):
        interp.eval("(down 10)")


def test_default_depth_allows_deep_recursion(interp):
    interp.eval("(def! sumdown (fn* (N) (if (> N 0) (+ N (sumdown (- N 1))) 0)))")
    assert interp.rep("(sumdown 150)") == "11325"
    assert interp.rep("(sumdown 400)") == "80200"


def test_interpreter_makes_room_for_configured_depth(monkeypatch):
    import sys
    from mal.interpreter import Interpreter, FRAMES_PER_CALL

    monkeypatch.setenv("MAL_MAX_CALL_DEPTH", "450")
    Interpreter()
    assert sys.getrecursionlimit() >= 450 * FRAMES_PER_CALL
