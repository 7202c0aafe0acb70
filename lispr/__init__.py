# Core type aliases for the lispr data model.
# Values are plain Python objects (int, float, str, bool, list) plus the
# Symbol, Lambda and Nil types from lispr.types. No Cons type is defined.
#
# Naming guidance:
# - SExpression: reader and special-form code, for unevaluated forms.
# - LispValue:  evaluator/runtime code, for evaluated values.
# Both resolve to `Any` and are interchangeable; code is data.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type passed into special forms
EvaluatorFn = Callable[..., LispValue]
