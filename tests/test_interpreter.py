import logging

import pytest

from lispr.interpreter import ENV_FILE_HEADER, Interpreter, evaluate_source
from lispr.types.errors import EmptyExpression, MismatchedParens, WrongNumArgs
from lispr.types.lambda_fn import Lambda
from lispr.types.symbol import Symbol


def test_evaluate_source_evaluates_first_expression_only(env):
    assert evaluate_source("(define x 1) x", env) == "success"
    assert evaluate_source("1 2", env) == 1


def test_evaluate_source_ignores_trailing_expressions(env):
    evaluate_source("(define x 1) (define y 2)", env)
    assert Symbol("x") in env
    assert Symbol("y") not in env


def test_evaluate_source_run_error(env):
    with pytest.raises(WrongNumArgs):
        evaluate_source("(car) (define y 2)", env)
    assert Symbol("y") not in env


def test_parse_error_prevents_evaluation(env):
    with pytest.raises(MismatchedParens):
        evaluate_source("(define x 1) (+ 1", env)
    assert Symbol("x") not in env


def test_empty_source(interp):
    with pytest.raises(EmptyExpression):
        interp.run("   ; just a comment")


def test_state_persists_between_runs(interp):
    interp.run("(define (inc n) (+ n 1))")
    assert interp.run("(inc 41)") == 42


def test_run_file(interp, tmp_path, caplog):
    script = tmp_path / "init.scm"
    script.write_text(
        "; setup\n"
        "\n"
        "(define a 1)\n"
        "(define b (+ a 1\n"
        "(car 1)\n"
        "(define c 3)\n"
    )
    with caplog.at_level(logging.WARNING, logger="lispr"):
        interp.run_file(script)

    assert interp.run("(list a c)") == [1, 3]
    assert interp.run("b") == "b"
    messages = [r.getMessage() for r in caplog.records]
    assert len(messages) == 2
    assert messages[0].startswith("parsing error in init.scm:4:")
    assert messages[1].startswith("runtime error in init.scm:5:")
    assert all(r.levelno == logging.WARNING for r in caplog.records)


def test_run_file_stops_at_undecodable_line(interp, tmp_path, caplog):
    script = tmp_path / "bad.scm"
    script.write_bytes(b"(define x 1)\n(define y \"\xff\xfe\")\n(define z 3)\n")
    with caplog.at_level(logging.WARNING, logger="lispr"):
        interp.run_file(script)

    assert interp.run("x") == 1
    assert interp.run("y") == "y"
    assert interp.run("z") == "z"
    [record] = caplog.records
    assert record.getMessage().startswith("stopped reading bad.scm:2:")


def test_run_file_missing(interp, tmp_path):
    with pytest.raises(OSError):
        interp.run_file(tmp_path / "missing.scm")


def test_save_env(interp, tmp_path):
    interp.run('(define greeting "say \\"hi\\"")')
    interp.run("(define nums '(1 2.5 #t nil))")
    interp.run("(define (square x) (* x x))")
    path = tmp_path / "saved.scm"
    interp.save_env(path)

    lines = path.read_text().splitlines()
    assert lines[0] == ENV_FILE_HEADER
    assert lines[1] == '(define greeting "say \\"hi\\"")'
    assert lines[2] == "(define nums (1 2.5 #t nil))"
    assert lines[3] == "(define square (lambda (x) (* x x)))"


def test_save_env_then_reload(interp, tmp_path):
    interp.run('(define name "lispr")')
    interp.run("(define (twice f x) (f (f x)))")
    path = tmp_path / "saved.scm"
    interp.save_env(path)

    fresh = Interpreter()
    fresh.run_file(path)
    assert fresh.run("name") == "lispr"
    assert isinstance(fresh.run("twice"), Lambda)
    assert fresh.run("(twice (lambda (n) (* n 3)) 2)") == 18


def test_save_env_only_top_level(interp, tmp_path):
    interp.run("(let ((hidden 1)) (define inner 2))")
    path = tmp_path / "saved.scm"
    interp.save_env(path)
    assert path.read_text() == ENV_FILE_HEADER + "\n"
