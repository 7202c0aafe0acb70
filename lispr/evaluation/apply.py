"""Application engine for lispr.

Closure application lives here so the evaluator and any builtin that needs to
call a Lambda share one implementation of the calling convention.
"""

import logging

from lispr import LispValue, EvaluatorFn
from lispr.types.lambda_fn import Lambda

logger = logging.getLogger(__name__)

ANONYMOUS = "<anonymous procedure>"


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
    name: str = ANONYMOUS,
) -> LispValue:
    """Apply a Lisp Lambda value.

    Parameters:
    - fn: The Lambda being applied.
    - args: The already-evaluated argument values.
    - evaluate_fn: Evaluator used to run the body.
    - name: How the callee was referred to, for error messages.

    The body runs in a new frame whose parent is the environment captured when
    the Lambda was created, never the caller's environment. Arity mismatches
    raise WrongNumArgs before anything is bound.
    """
    logger.debug("calling %s with args: %s", name, args)
    local_env = fn.extend_env(args, name)
    return evaluate_fn(fn.body, local_env)
