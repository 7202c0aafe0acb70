"""Core evaluator for the lispr interpreter.

Decides for each node whether it self-evaluates, resolves as a symbol, or is a
procedure invocation, and in which order arguments are evaluated. Evaluation
is plain recursion on the host stack; very deep user recursion ends in
RecursionError.
"""

from __future__ import annotations

import logging
import math
import sys

from lispr import SExpression, LispValue
from lispr.builtins import lookup_builtin
from lispr.types.environment import Environment
from lispr.types.errors import UncallableValue
from lispr.types.lambda_fn import Lambda
from lispr.types.nil import Nil
from lispr.types.symbol import Symbol
from lispr.types.value import to_display_text, type_name
from lispr.evaluation.apply import apply_lambda

logger = logging.getLogger(__name__)

# Names that resolve before the environment is consulted
CONSTANTS: dict[Symbol, LispValue] = {
    Symbol("nil"): Nil,
    Symbol("else"): True,
    Symbol("pi"): math.pi,
    Symbol("e"): math.e,
    Symbol("NAN"): math.nan,
    Symbol("INF"): math.inf,
    Symbol("-INF"): -math.inf,
    Symbol("MAX"): sys.float_info.max,
    Symbol("MIN"): -sys.float_info.max,
}


def resolve_symbol(sym: Symbol, env: Environment) -> LispValue:
    """Resolve a symbol: constants first, then the environment chain."""
    if sym in CONSTANTS:
        return CONSTANTS[sym]
    return env.get(sym)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate one expression in `env`."""
    match expr:
        case Symbol():
            # 'foo evaluates to the bare symbol foo
            if expr.is_quoted:
                return Symbol(expr.id[1:])
            return resolve_symbol(expr, env)
        case []:
            return Nil
        case [head, *tail]:
            return invoke(head, tail, env)

    # --- Atoms return as-is ---
    return expr


def evaluate_all(exprs: list[SExpression], env: Environment) -> list[LispValue]:
    """Evaluate every expression in order; the first failure propagates."""
    return [evaluate(e, env) for e in exprs]


def invoke(head: SExpression, tail: list[SExpression], env: Environment) -> LispValue:
    """Call the operator `head` with the raw argument forms `tail`."""
    match head:
        case Symbol():
            builtin = lookup_builtin(head)
            if builtin is not None:
                builtin.check_arity(len(tail))
                if builtin.is_special:
                    return builtin.fn(tail, env, evaluate)
                return builtin.fn(env, evaluate_all(tail, env))

            value = resolve_symbol(head, env)
            if isinstance(value, Lambda):
                return apply_lambda(value, evaluate_all(tail, env), evaluate, head.id)
            raise UncallableValue(head.id, type_name(value))

        case list():
            # e.g. ((lambda (x) x) 1): evaluate the operator, then call again
            operator = evaluate(head, env)
            logger.debug("operator %s evaluated to %s", head, operator)
            return evaluate([operator, *tail], env)

        case Lambda():
            return apply_lambda(head, evaluate_all(tail, env), evaluate)

    raise UncallableValue(to_display_text(head), type_name(head))
