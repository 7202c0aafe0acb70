from __future__ import annotations
import sys


class Symbol:
    """An interned identifier. Two Symbols are equal when their names are."""

    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id = sys.intern(name)

    @property
    def is_quoted(self) -> bool:
        """True for the reader's `'name` form."""
        return len(self.id) > 1 and self.id.startswith("'")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
