from lispr import EvaluatorFn
from lispr import SExpression, LispValue
from lispr.types.environment import Environment
from lispr.types.value import is_truthy


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(if test then else): only the chosen branch is evaluated."""
    test, then_expr, else_expr = tail
    if is_truthy(evaluate_fn(test, env)):
        return evaluate_fn(then_expr, env)
    return evaluate_fn(else_expr, env)
