from __future__ import annotations
import sys


class Symbol:
    """An identifier. Two symbols are equal when their names are."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        # one shared string per distinct name; environments hash these constantly
        object.__setattr__(self, "name", sys.intern(name))

    def __setattr__(self, key, value):
        raise AttributeError("Symbol is immutable")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
