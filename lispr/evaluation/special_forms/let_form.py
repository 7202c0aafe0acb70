from lispr import EvaluatorFn
from lispr import SExpression, LispValue
from lispr.types.environment import Environment
from lispr.types.errors import LisprTypeError, WrongNumArgs
from lispr.types.symbol import Symbol
from lispr.types.value import type_name


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let ((name expr) (name expr) ...) body)

    Every expr is evaluated in the enclosing environment, so bindings do not
    see each other. The body runs in one new child frame holding all of them.
    """
    bindings, body = tail
    if not isinstance(bindings, list):
        raise LisprTypeError("let", "List", type_name(bindings))

    local_env = Environment(outer=env)
    for bind in bindings:
        if not isinstance(bind, list):
            raise LisprTypeError("let (in binds list)", "List", type_name(bind))
        if len(bind) != 2:
            raise WrongNumArgs("let (in binding)", 2, len(bind))
        name, expr = bind
        if not isinstance(name, Symbol):
            raise LisprTypeError("let (in binding)", "Symbol", type_name(name))
        local_env.define(name, evaluate_fn(expr, env))

    return evaluate_fn(body, local_env)
