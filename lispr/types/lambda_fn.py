"""Lambda function representation and argument binding for lispr."""

from __future__ import annotations

from lispr import SExpression, LispValue
from lispr.types.environment import Environment
from lispr.types.symbol import Symbol
from lispr.types.errors import WrongNumArgs

# Parameter marker: the name after it collects the remaining arguments
VARIADIC = Symbol(".")


class Lambda:
    """A first-class lambda with formal parameters, body, and closure env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: SExpression, env: Environment):
        self.params: list[Symbol] = list(params)
        self.body: SExpression = body
        # Shared with every other closure and call frame created in `env`
        self.env: Environment = env

    @property
    def is_variadic(self) -> bool:
        return VARIADIC in self.params

    def __str__(self) -> str:
        from lispr.types.value import to_serialized_text
        return to_serialized_text(self)

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the lambda."""
        return str(self)

    def extend_env(self, args: list[LispValue], name: str) -> Environment:
        """
        Bind the given argument values to this lambda's parameters and return a
        new Environment, child of the captured one, for evaluating the body.

        `name` is only used for error reporting.
        """
        if self.is_variadic:
            fixed = self.params.index(VARIADIC)
            if len(args) < fixed:
                raise WrongNumArgs(name, fixed, len(args))
        elif len(args) != len(self.params):
            raise WrongNumArgs(name, len(self.params), len(args))

        local_env = Environment(outer=self.env)
        for i, param in enumerate(self.params):
            if param == VARIADIC:
                local_env.define(self.params[i + 1], list(args[i:]))
                break
            local_env.define(param, args[i])
        return local_env
