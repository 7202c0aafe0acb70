from lispr import EvaluatorFn
from lispr import SExpression, LispValue
from lispr.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """(quote expr) / '(...): return expr unevaluated."""
    return tail[0]
