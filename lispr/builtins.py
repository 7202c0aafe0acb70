"""The complete builtin table: special forms plus eager procedures.

Builtin names are resolved before the environment, so a user binding can
never shadow them in operator position.
"""
from __future__ import annotations

from typing import Optional

from lispr.builtin.env_builtin import PROCEDURES
from lispr.evaluation.special_forms import SPECIAL_FORMS
from lispr.types.builtin import Builtin
from lispr.types.symbol import Symbol

BUILTINS: dict[Symbol, Builtin] = {**SPECIAL_FORMS, **PROCEDURES}


def lookup_builtin(name: Symbol) -> Optional[Builtin]:
    return BUILTINS.get(name)
