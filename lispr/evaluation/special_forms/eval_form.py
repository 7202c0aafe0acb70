from lispr import EvaluatorFn
from lispr import SExpression, LispValue
from lispr.types.environment import Environment


def eval_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(eval expr): evaluate expr, then evaluate the resulting form."""
    form = evaluate_fn(tail[0], env)
    return evaluate_fn(form, env)
