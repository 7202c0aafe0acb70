from lispr import EvaluatorFn
from lispr import SExpression, LispValue
from lispr.types.environment import Environment
from lispr.types.value import type_name


def env_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(env): symbols bound in the current frame, parents excluded."""
    return env.names()


def type_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(type expr): name of the value's type, e.g. "Integer" or "Proc"."""
    return type_name(evaluate_fn(tail[0], env))
