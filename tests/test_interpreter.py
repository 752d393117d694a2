import logging

import pytest

from hyoka.errors import (
    CyclicBinding,
    HyokaTypeError,
    RecursionDepthExceeded,
    UnexpectedCloseParen,
    UnexpectedEOF,
)
from hyoka.interpreter import Interpreter
from hyoka.types.environment import Environment
from hyoka.types.expression import List, Number
from hyoka.types.symbol import Symbol


def test_definitions_persist_across_calls(interp):
    assert interp.eval("(define x 5)") is None
    assert interp.eval("(define double (lambda (a) (* a 2)))") is None
    assert interp.eval("(double x)") == Number(10)


def test_parse(interp):
    assert interp.parse("(a 1)") == List.of(Symbol("a"), Number(1))


def test_parse_error_leaves_env_untouched(interp):
    interp.eval("(define x 1)")
    with pytest.raises(UnexpectedEOF):
        interp.eval("(define x 2")
    with pytest.raises(UnexpectedCloseParen):
        interp.eval(")")
    assert interp.eval("x") == Number(1)


def test_trailing_tokens_are_ignored(interp, caplog):
    with caplog.at_level(logging.WARNING, logger="hyoka.interpreter"):
        assert interp.eval("(+ 1 2) (define x 3)") == Number(3)
    assert interp.eval("x") == Symbol("x")
    assert "ignoring 5 token(s)" in caplog.text


def test_eval_all(interp):
    results = interp.eval_all("(define x 2) (* x 3) x (nope)")
    assert results == [None, Number(6), Number(2), None]


def test_eval_file(interp, tmp_path):
    src = tmp_path / "prog.lisp"
    src.write_text("(define add (lambda (a b) (+ a b)))\n(add 2 3)\n", encoding="utf-8")
    assert interp.eval_file(src) == [None, Number(5)]


def test_fatal_errors_propagate_and_session_continues(interp):
    interp.eval("(define x x)")
    with pytest.raises(CyclicBinding):
        interp.eval("x")
    assert interp.eval("(+ 1 1)") == Number(2)


def test_shared_environment():
    env = Environment.new_empty()
    Interpreter(env).eval("(define x 1)")
    assert env.get(Symbol("x")) == Number(1)


def test_max_depth_applies_to_parse_and_eval():
    interp = Interpreter(max_depth=3)
    assert interp.eval("(+ (+ 1))") == Number(1)
    with pytest.raises(RecursionDepthExceeded):
        interp.eval("(+ (+ (+ 1)))")


def test_max_depth_from_environment(monkeypatch):
    monkeypatch.setenv("HYOKA_MAX_DEPTH", "7")
    assert Interpreter().max_depth == 7


def test_local_failures_are_logged(interp, caplog):
    with caplog.at_level(logging.INFO, logger="hyoka.evaluation.evaluator"):
        assert interp.eval("(mystery 1)") is None
    assert "unknown procedure 'mystery' invoked" in caplog.text


def test_eval_iter_keeps_earlier_results(interp):
    results = []
    with pytest.raises(HyokaTypeError):
        for result in interp.eval_iter("(define x 2) (* x 3) (+ 1 foo) (define y 1)"):
            results.append(result)
    assert results == [None, Number(6)]
    assert interp.eval("x") == Number(2)
    assert interp.eval("y") == Symbol("y")
