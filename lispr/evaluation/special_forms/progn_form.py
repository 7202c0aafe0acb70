from lispr import EvaluatorFn
from lispr import SExpression, LispValue
from lispr.types.environment import Environment
from lispr.types.nil import Nil


def progn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    result: LispValue = Nil
    for e in tail:
        result = evaluate_fn(e, env)
    return result
