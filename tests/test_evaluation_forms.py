import pytest

from lispr.types.errors import ProcError, LisprTypeError, WrongNumArgs
from lispr.types.lambda_fn import Lambda
from lispr.types.nil import Nil
from lispr.types.symbol import Symbol

# ------------------ define / undef ------------------


def test_define_symbol(run, env):
    assert run("(define x (+ 1 2))") == "success"
    assert env.get(Symbol("x")) == 3


def test_define_function_shorthand(run):
    run("(define (square x) (* x x))")
    assert run("(square 9)") == 81
    assert run("(type square)") == "Proc"


def test_define_function_without_params(run):
    run('(define (greet) "hi")')
    assert run("(greet)") == "hi"


def test_define_empty_list_fails(run):
    with pytest.raises(ProcError) as info:
        run("(define () 1)")
    assert str(info.value) == "define: cannot define an empty list"


def test_define_non_symbol_fails(run):
    with pytest.raises(ProcError) as info:
        run("(define 5 1)")
    assert info.value.msg == "only symbols can be redefined"


def test_define_shorthand_name_must_be_symbol(run):
    with pytest.raises(LisprTypeError):
        run("(define (5 x) x)")


def test_define_inside_closure_is_local(run):
    run("(define (f) (define inner 1))")
    run("(f)")
    assert run("inner") == "inner"


def test_define_arity(run):
    with pytest.raises(WrongNumArgs) as info:
        run("(define x)")
    assert (info.value.name, info.value.expected, info.value.got) == ("define", 2, 1)


def test_undef(run):
    run("(define x 1)")
    assert run("(undef x)") == "success"
    assert run("x") == "x"


def test_undef_requires_symbol(run):
    with pytest.raises(LisprTypeError) as info:
        run("(undef 1)")
    assert info.value.expected == "Symbol"
    assert info.value.got == "Integer"


# ------------------ let ------------------


def test_let(run):
    assert run("(let ((a 1) (b 2)) (+ a b))") == 3


def test_let_bindings_do_not_see_each_other(run):
    run("(define a 10)")
    assert run("(let ((a 1) (b a)) b)") == 10


def test_let_does_not_leak(run):
    run("(let ((tmp 1)) tmp)")
    assert run("tmp") == "tmp"


def test_let_shadows_outer(run):
    run("(define x 1)")
    assert run("(let ((x 2)) x)") == 2
    assert run("x") == 1


def test_let_empty_bindings(run):
    assert run("(let () 5)") == 5


@pytest.mark.parametrize(
    "source,error",
    [
        ("(let x 1)", LisprTypeError),
        ("(let (x) 1)", LisprTypeError),
        ("(let ((x 1 2)) x)", WrongNumArgs),
        ("(let ((1 2)) 1)", LisprTypeError),
    ]
)
def test_let_errors(run, source, error):
    with pytest.raises(error):
        run(source)


# ------------------ lambda ------------------


def test_lambda_creates_closure(run, env):
    fn = run("(lambda (a b) (+ a b))")
    assert isinstance(fn, Lambda)
    assert fn.params == [Symbol("a"), Symbol("b")]
    assert fn.env is env


def test_lambda_params_must_be_symbols(run):
    with pytest.raises(LisprTypeError) as info:
        run("(lambda (a 1) a)")
    assert info.value.name == "lambda (in params)"


def test_lambda_params_must_be_list(run):
    with pytest.raises(LisprTypeError):
        run("(lambda x x)")


@pytest.mark.parametrize("params", ["(a .)", "(. a b)", "(a . b c)"])
def test_lambda_malformed_variadic(run, params):
    with pytest.raises(ProcError):
        run(f"(lambda {params} a)")


# ------------------ if / cond ------------------


def test_if(run):
    assert run("(if (> 2 1) 'yes 'no)") == Symbol("yes")
    assert run("(if (> 1 2) 'yes 'no)") == Symbol("no")


def test_if_untaken_branch_not_evaluated(run):
    assert run("(if #t 1 (undefined-proc))") == 1
    assert run("(if #f (undefined-proc) 2)") == 2


def test_if_uses_truthiness(run):
    assert run("(if 0 'yes 'no)") == Symbol("no")
    assert run("(if (list) 'yes 'no)") == Symbol("no")
    assert run("(if (list 1) 'yes 'no)") == Symbol("yes")
    assert run('(if "" \'yes \'no)') == Symbol("yes")


def test_if_requires_both_branches(run):
    with pytest.raises(WrongNumArgs):
        run("(if #t 1)")


def test_cond(run):
    run("(define (sign n) (cond ((< n 0) -1) ((= n 0) 0) (else 1)))")
    assert run("(sign -5)") == -1
    assert run("(sign 0)") == 0
    assert run("(sign 5)") == 1


def test_cond_short_circuits(run):
    assert run("(cond (#t 'first) ((undefined-proc) 'second))") == Symbol("first")


def test_cond_no_match(run):
    with pytest.raises(ProcError) as info:
        run("(cond (#f 1) (0 2))")
    assert info.value.name == "cond"


def test_cond_requires_a_branch(run):
    with pytest.raises(ProcError) as info:
        run("(cond)")
    assert str(info.value) == "cond: at least 1 branch required"


def test_cond_branch_shape(run):
    with pytest.raises(WrongNumArgs):
        run("(cond (#t 1 2))")
    with pytest.raises(LisprTypeError):
        run("(cond 1)")


# ------------------ quote / eval ------------------


def test_quote(run):
    assert run("(quote (+ 1 2))") == [Symbol("+"), 1, 2]


def test_quote_sugar(run):
    assert run("'(a b c)") == [Symbol("a"), Symbol("b"), Symbol("c")]


def test_eval(run):
    assert run("(eval (quote (+ 1 2)))") == 3


def test_eval_constructed_code(run):
    assert run("(eval (cons '+ '(1 2 3)))") == 6


def test_eval_of_self_evaluating(run):
    assert run("(eval 5)") == 5


# ------------------ env / type / begin ------------------


def test_env_lists_local_frame(run):
    run("(define a 1)")
    run("(define b 2)")
    assert run("(env)") == [Symbol("a"), Symbol("b")]


def test_env_inside_let(run):
    run("(define outer 1)")
    assert run("(let ((inner 2)) (env))") == [Symbol("inner")]


def test_env_takes_no_arguments(run):
    with pytest.raises(WrongNumArgs):
        run("(env 1)")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(type 1)", "Integer"),
        ("(type 1.5)", "Float"),
        ('(type "s")', "Str"),
        ("(type #t)", "Bool"),
        ("(type '(1))", "List"),
        ("(type nil)", "Nil"),
        ("(type (lambda () 1))", "Proc"),
        ("(type 'sym)", "Symbol"),
    ]
)
def test_type(run, source, expected):
    assert run(source) == expected


def test_begin(run):
    assert run("(begin (define x 2) (* x 10))") == 20
    assert run("(begin)") is Nil
