"""Exception hierarchy for lispr.

Two disjoint families hang off LisprError: ParseError for problems found while
reading source text, and RunError for failures raised during evaluation.
"""


class LisprError(Exception):
    """ Base class for all lispr errors"""
    pass


# -------------------------------
# Parse-time
# -------------------------------
class ParseError(LisprError):
    """ Raised when source text cannot be read into an expression"""


class EmptyExpression(ParseError):
    """ Raised when the input contains no tokens at all"""

    def __init__(self):
        super().__init__("empty expression")


class MismatchedParens(ParseError):
    """ Raised when left and right paren counts differ"""

    def __init__(self):
        super().__init__("mismatched parentheses")


class ErroneousToken(ParseError):
    """ Raised for a token in a structurally invalid position"""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"encountered erroneous '{token}'")


# -------------------------------
# Run-time
# -------------------------------
class RunError(LisprError):
    """ Raised when evaluation of an expression fails"""


class ProcError(RunError):
    """ Generic failure reported by a builtin"""

    def __init__(self, name: str, msg: str):
        self.name = name
        self.msg = msg
        super().__init__(f"{name}: {msg}")


class IndexOutOfBounds(RunError):
    """ Raised when a list index falls outside the list"""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"{index}: index out of bounds")


class LisprTypeError(RunError):
    """ Raised when a builtin receives a value of the wrong variant"""

    def __init__(self, name: str, expected: str, got: str):
        self.name = name
        self.expected = expected
        self.got = got
        super().__init__(f"{name}: expected a {expected}, got a {got} instead")


class UncallableValue(RunError):
    """ Raised when a non-procedure is invoked"""

    def __init__(self, name: str, typename: str):
        self.name = name
        self.typename = typename
        super().__init__(f"value `{name}` (of type {typename}) is uncallable")


class WrongNumArgs(RunError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

    def __init__(self, name: str, expected: int, got: int):
        self.name = name
        self.expected = expected
        self.got = got
        super().__init__(f"{name}: expected {expected} params, got {got} instead")
