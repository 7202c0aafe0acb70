"""Builtin table entries.

Every builtin declares up front how it wants its arguments:

- Kind.SPECIAL:   fn(tail, env, evaluate_fn) receives the raw, unevaluated
                  argument forms and decides what to evaluate itself.
- Kind.PROCEDURE: fn(env, args) receives arguments already evaluated left to
                  right by the evaluator.

Arity is declared on the entry too and checked before any argument is
evaluated.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from lispr.types.errors import ProcError, WrongNumArgs


class Kind(Enum):
    SPECIAL = "special"
    PROCEDURE = "procedure"


@dataclass(frozen=True)
class Builtin:
    name: str
    fn: Callable
    kind: Kind
    nargs: Optional[int] = None  # exact argument count, if fixed
    min_args: int = 0
    # what `min_args` counts, in the shortfall message
    arg_noun: str = "argument"

    @property
    def is_special(self) -> bool:
        return self.kind is Kind.SPECIAL

    def check_arity(self, got: int) -> None:
        if self.nargs is not None and got != self.nargs:
            raise WrongNumArgs(self.name, self.nargs, got)
        if got < self.min_args:
            plural = "" if self.min_args == 1 else "s"
            raise ProcError(self.name, f"at least {self.min_args} {self.arg_noun}{plural} required")


def special(
    name: str,
    fn: Callable,
    nargs: Optional[int] = None,
    min_args: int = 0,
    arg_noun: str = "argument",
) -> Builtin:
    return Builtin(name, fn, Kind.SPECIAL, nargs, min_args, arg_noun)


def procedure(name: str, fn: Callable, nargs: Optional[int] = None, min_args: int = 0) -> Builtin:
    return Builtin(name, fn, Kind.PROCEDURE, nargs, min_args)
