from lispr import EvaluatorFn
from lispr import SExpression, LispValue
from lispr.types.errors import ProcError, LisprTypeError
from lispr.types.symbol import Symbol
from lispr.types.environment import Environment
from lispr.types.value import type_name
from lispr.evaluation.special_forms.lambda_form import lambda_form

# Returned by forms that only mutate the environment
SUCCESS = "success"


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    (define (name param1 param2 ...) body)

    Binds in the current frame only. The second shape is shorthand for
    (define name (lambda (param1 param2 ...) body)).
    """
    target, body = tail
    match target:
        case Symbol():
            env.define(target, evaluate_fn(body, env))
        case list():
            if not target:
                raise ProcError("define", "cannot define an empty list")
            name, *params = target
            if not isinstance(name, Symbol):
                raise LisprTypeError("define", "Symbol", type_name(name))
            env.define(name, lambda_form([params, body], env, evaluate_fn))
        case _:
            raise ProcError("define", "only symbols can be redefined")
    return SUCCESS


def undef_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(undef name): drop a binding from the current frame."""
    name = tail[0]
    if not isinstance(name, Symbol):
        raise LisprTypeError("undef", "Symbol", type_name(name))
    env.undefine(name)
    return SUCCESS
