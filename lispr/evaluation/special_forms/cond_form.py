"""Special form: cond, a multi-branch conditional.

    (cond (test1 expr1)
          (test2 expr2)
          (else  expr3))

`else` is not syntax: it evaluates to #t like any other constant, which is
what makes it a catch-all.
"""

from lispr import EvaluatorFn
from lispr import SExpression, LispValue
from lispr.types.environment import Environment
from lispr.types.errors import ProcError, LisprTypeError, WrongNumArgs
from lispr.types.value import is_truthy, type_name


def cond_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    for branch in tail:
        if not isinstance(branch, list):
            raise LisprTypeError("cond", "List", type_name(branch))
        if len(branch) != 2:
            raise WrongNumArgs("cond (in branch)", 2, len(branch))
        test, consequent = branch
        if is_truthy(evaluate_fn(test, env)):
            return evaluate_fn(consequent, env)

    raise ProcError("cond", "no branches evaluated and no `else` branch found")
