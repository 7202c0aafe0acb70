"""Built-in procedures for the lispr runtime.

This module defines arithmetic, comparison, logic, list processing and string
procedures. Each one receives its arguments already evaluated, as
`fn(env, args)`; arity is declared on the table entry at the bottom of the
file and checked by the evaluator before the arguments are evaluated.
"""
from __future__ import annotations

import math
import operator
import random
from typing import Callable

from lispr import LispValue
from lispr.types.builtin import procedure
from lispr.types.environment import Environment
from lispr.types.errors import IndexOutOfBounds, LisprTypeError, ProcError
from lispr.types.nil import Nil
from lispr.types.symbol import Symbol
from lispr.types.value import (
    INT_MAX,
    INT_MIN,
    compare,
    is_equal,
    is_integer,
    is_number,
    is_truthy,
    to_display_text,
    type_name,
)


def _extract(name: str, value: LispValue, pytype: type, expected: str) -> LispValue:
    """Return `value` if it is a `pytype`, else raise a LisprTypeError for `name`."""
    if not isinstance(value, pytype):
        raise LisprTypeError(name, expected, type_name(value))
    return value


# -------------------------------
# Arithmetic
# -------------------------------
def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _int_op(op: str, a: int, b: int) -> int:
    if op in ("/", "modulo") and b == 0:
        raise ProcError(op, "division by zero")
    match op:
        case "+":
            result = a + b
        case "-":
            result = a - b
        case "*":
            result = a * b
        case "/":
            result = _trunc_div(a, b)
        case _:
            # remainder takes the sign of the dividend
            result = a - b * _trunc_div(a, b)
    if not INT_MIN <= result <= INT_MAX:
        raise ProcError(op, "integer overflow")
    return result


def _float_op(op: str, a: float, b: float) -> float:
    match op:
        case "+":
            return a + b
        case "-":
            return a - b
        case "*":
            return a * b
        case "/":
            if b == 0.0:
                # IEEE 754: x/0 is a signed infinity, 0/0 is NaN
                if a == 0.0 or math.isnan(a):
                    return math.nan
                return math.copysign(math.inf, a) * math.copysign(1.0, b)
            return a / b
        case _:
            if b == 0.0 or math.isinf(a):
                return math.nan
            return math.fmod(a, b)


def _math(op: str, args: list[LispValue]) -> LispValue:
    """Left fold `op` over numeric args; any Float operand widens the step to Float."""
    for arg in args:
        if not is_number(arg):
            raise LisprTypeError(op, "number", type_name(arg))

    result = args[0]
    for x in args[1:]:
        if is_integer(result) and is_integer(x):
            result = _int_op(op, result, x)
        else:
            result = _float_op(op, float(result), float(x))
    return result


def add(env: Environment, args: list[LispValue]) -> LispValue:
    return _math("+", args)


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    return _math("-", args)


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    return _math("*", args)


def div(env: Environment, args: list[LispValue]) -> LispValue:
    return _math("/", args)


def modulo(env: Environment, args: list[LispValue]) -> LispValue:
    return _math("modulo", args)


# -------------------------------
# Comparison and logic
# -------------------------------
def equals(env: Environment, args: list[LispValue]) -> bool:
    return is_equal(args[0], args[1])


def not_equals(env: Environment, args: list[LispValue]) -> bool:
    return not is_equal(args[0], args[1])


def _ordered(test: Callable[[int, int], bool]) -> Callable[[Environment, list[LispValue]], bool]:
    """Build an ordering procedure; incomparable operands always yield #f."""
    def compare_builtin(env: Environment, args: list[LispValue]) -> bool:
        order = compare(args[0], args[1])
        return order is not None and test(order, 0)
    return compare_builtin


gt = _ordered(operator.gt)
gte = _ordered(operator.ge)
lt = _ordered(operator.lt)
lte = _ordered(operator.le)


def logical_and(env: Environment, args: list[LispValue]) -> bool:
    """Both operands are already evaluated, so there is no short-circuit."""
    return is_truthy(args[0]) and is_truthy(args[1])


def logical_or(env: Environment, args: list[LispValue]) -> bool:
    return is_truthy(args[0]) or is_truthy(args[1])


def logical_not(env: Environment, args: list[LispValue]) -> bool:
    return not is_truthy(args[0])


# -------------------------------
# Lists
# -------------------------------
def cons(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """(cons value list): a new list with value prepended."""
    value, tail = args
    return [value, *_extract("cons", tail, list, "List")]


def length(env: Environment, args: list[LispValue]) -> int:
    """Length of a list, or number of characters in a string."""
    xs = args[0]
    if isinstance(xs, (list, str)):
        return len(xs)
    raise LisprTypeError("length", "List or Str", type_name(xs))


def list_ref(env: Environment, args: list[LispValue]) -> LispValue:
    """(list-ref list n): the n-th element, counting from 1."""
    xs = _extract("list-ref", args[0], list, "List")
    idx = args[1]
    if not is_integer(idx):
        raise LisprTypeError("list-ref", "Integer", type_name(idx))
    if not 1 <= idx <= len(xs):
        raise IndexOutOfBounds(idx)
    return xs[idx - 1]


def append(env: Environment, args: list[LispValue]) -> list[LispValue]:
    first = _extract("append", args[0], list, "List")
    second = _extract("append", args[1], list, "List")
    return first + second


def car(env: Environment, args: list[LispValue]) -> LispValue:
    """First element of a list; Nil for the empty list."""
    xs = _extract("car", args[0], list, "List")
    return xs[0] if xs else Nil


def cdr(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """All but the first element; the empty list for empty or singleton lists."""
    xs = _extract("cdr", args[0], list, "List")
    return xs[1:]


def list_builtin(env: Environment, args: list[LispValue]) -> list[LispValue]:
    return list(args)


def rand(env: Environment, args: list[LispValue]) -> LispValue:
    """(rand list) picks an element of list; (rand a b ...) picks an argument."""
    if len(args) > 1:
        return random.choice(args)
    xs = _extract("rand", args[0], list, "List")
    return random.choice(xs) if xs else Nil


# -------------------------------
# Strings
# -------------------------------
def cat(env: Environment, args: list[LispValue]) -> str:
    """Concatenate the display text of every argument."""
    return "".join(to_display_text(a) for a in args)


def uppercase(env: Environment, args: list[LispValue]) -> str:
    return _extract("uppercase", args[0], str, "Str").upper()


def lowercase(env: Environment, args: list[LispValue]) -> str:
    return _extract("lowercase", args[0], str, "Str").lower()


def print_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Print space-separated display text of args followed by newline; returns Nil."""
    print(" ".join(to_display_text(a) for a in args))
    return Nil


PROCEDURES = {
    Symbol("+"): procedure("+", add, min_args=2),
    Symbol("-"): procedure("-", sub, min_args=2),
    Symbol("*"): procedure("*", mul, min_args=2),
    Symbol("/"): procedure("/", div, min_args=2),
    Symbol("modulo"): procedure("modulo", modulo, min_args=2),
    Symbol("="): procedure("=", equals, nargs=2),
    Symbol("!="): procedure("!=", not_equals, nargs=2),
    Symbol(">"): procedure(">", gt, nargs=2),
    Symbol(">="): procedure(">=", gte, nargs=2),
    Symbol("<"): procedure("<", lt, nargs=2),
    Symbol("<="): procedure("<=", lte, nargs=2),
    Symbol("and"): procedure("and", logical_and, nargs=2),
    Symbol("or"): procedure("or", logical_or, nargs=2),
    Symbol("not"): procedure("not", logical_not, nargs=1),
    Symbol("list-ref"): procedure("list-ref", list_ref, nargs=2),
    Symbol("append"): procedure("append", append, nargs=2),
    Symbol("car"): procedure("car", car, nargs=1),
    Symbol("cdr"): procedure("cdr", cdr, nargs=1),
    Symbol("length"): procedure("length", length, nargs=1),
    Symbol("cons"): procedure("cons", cons, nargs=2),
    Symbol("list"): procedure("list", list_builtin),
    Symbol("rand"): procedure("rand", rand, min_args=1),
    Symbol("cat"): procedure("cat", cat),
    Symbol("uppercase"): procedure("uppercase", uppercase, nargs=1),
    Symbol("lowercase"): procedure("lowercase", lowercase, nargs=1),
    Symbol("print"): procedure("print", print_builtin),
}
