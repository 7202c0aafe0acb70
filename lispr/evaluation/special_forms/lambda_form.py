from lispr import EvaluatorFn
from lispr import SExpression, LispValue
from lispr.types.environment import Environment
from lispr.types.errors import ProcError, LisprTypeError
from lispr.types.lambda_fn import Lambda, VARIADIC
from lispr.types.symbol import Symbol
from lispr.types.value import type_name


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (lambda (a b) body)
    (lambda (a . rest) body)

    The closure captures `env`, the environment it is created in.
    """
    params, body = tail
    if not isinstance(params, list):
        raise LisprTypeError("lambda", "List", type_name(params))

    for p in params:
        if not isinstance(p, Symbol):
            raise LisprTypeError("lambda (in params)", "Symbol", type_name(p))

    if VARIADIC in params and params.index(VARIADIC) != len(params) - 2:
        raise ProcError("lambda", "`.` must be followed by exactly one parameter")

    return Lambda(params, body, env)
