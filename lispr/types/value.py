"""Value model rules: type names, truthiness, equality, ordering and text.

Runtime values are plain Python objects:

    Symbol  -> lispr.types.symbol.Symbol
    Str     -> str
    Integer -> int (never bool)
    Float   -> float
    Bool    -> bool
    List    -> list
    Proc    -> lispr.types.lambda_fn.Lambda
    Nil     -> lispr.types.nil.Nil

`bool` is a subclass of `int` in Python, so every numeric check in this module
excludes it explicitly.
"""

from __future__ import annotations

from typing import Optional

from lispr import LispValue
from lispr.types.lambda_fn import Lambda
from lispr.types.nil import NilType
from lispr.types.symbol import Symbol

INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


def is_integer(x: LispValue) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def is_number(x: LispValue) -> bool:
    return is_integer(x) or isinstance(x, float)


def type_name(x: LispValue) -> str:
    """Human-friendly type of a value, as reported by `type` and in errors."""
    match x:
        case Symbol():
            return "Symbol"
        case str():
            return "Str"
        case bool():
            return "Bool"
        case int():
            return "Integer"
        case float():
            return "Float"
        case list():
            return "List"
        case Lambda():
            return "Proc"
        case NilType():
            return "Nil"
    raise TypeError(f"not a lispr value: {x!r}")


def is_truthy(x: LispValue) -> bool:
    """nil, the empty list, #f and numeric zero are falsy; everything else is truthy."""
    if isinstance(x, bool):
        return x
    if isinstance(x, NilType):
        return False
    if isinstance(x, list):
        return len(x) != 0
    if is_number(x):
        return x != 0
    return True


def _widen(a: LispValue, b: LispValue) -> tuple[LispValue, LispValue]:
    """A mixed Integer/Float pair is compared as two Floats."""
    if is_integer(a) != is_integer(b):
        return float(a), float(b)
    return a, b


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Equality within matching variants; Integer and Float compare numerically."""
    if is_number(a) and is_number(b):
        a, b = _widen(a, b)
        return a == b
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, Lambda) or isinstance(b, Lambda):
        return a is b
    if type(a) is not type(b):
        return False
    return a == b


def compare(a: LispValue, b: LispValue) -> Optional[int]:
    """Partial order over numbers: -1, 0 or 1, or None when incomparable.

    NaN is incomparable with everything, itself included.
    """
    if not (is_number(a) and is_number(b)):
        return None
    a, b = _widen(a, b)
    if a < b:
        return -1
    if a > b:
        return 1
    if a == b:
        return 0
    return None


def _escape(s: str) -> str:
    return s.replace("\\", "\\\\").replace('"', '\\"')


def to_serialized_text(x: LispValue) -> str:
    """Round-trippable text: reading it back gives an equal value."""
    match x:
        case Symbol():
            return x.id
        case str():
            return f'"{_escape(x)}"'
        case bool():
            return "#t" if x else "#f"
        case int():
            return str(x)
        case float():
            return repr(x)
        case list():
            return "(" + " ".join(to_serialized_text(item) for item in x) + ")"
        case Lambda():
            params = " ".join(p.id for p in x.params)
            return f"(lambda ({params}) {to_serialized_text(x.body)})"
        case NilType():
            return "nil"
    raise TypeError(f"not a lispr value: {x!r}")


def to_display_text(x: LispValue) -> str:
    """Human-friendly text. Same as the serialized form except that a bare
    string is shown without quotes."""
    match x:
        case str():
            return x
        case Lambda():
            params = " ".join(p.id for p in x.params)
            return f"(lambda ({params}) {to_display_text(x.body)})"
    return to_serialized_text(x)
