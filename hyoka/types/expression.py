"""Expression nodes for Hyoka.

An Expression is one of four immutable variants: Number, Symbol, List and
Procedure. The reader produces the first three; Procedure values are only
created by the `lambda` special form. List and Procedure payloads are tuples,
so sub-trees are shared freely between nodes and never copied.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from io import StringIO
from typing import Iterable, Iterator, Union

from hyoka.types.symbol import Symbol


@dataclass(frozen=True)
class Number:
    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))

    # nan equals nan so that parsed trees compare equal to their re-parse
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.value == other.value or (math.isnan(self.value) and math.isnan(other.value))

    def __hash__(self) -> int:
        return hash(math.nan) if math.isnan(self.value) else hash(self.value)

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class List:
    items: tuple[Expression, ...] = ()

    def __post_init__(self):
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def of(cls, *items: Expression) -> List:
        return cls(items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Expression]:
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __str__(self) -> str:
        return _write_list(self.items)


@dataclass(frozen=True)
class Procedure:
    """A user procedure: formal parameter symbols plus the body form's elements."""

    parameters: tuple[Symbol, ...]
    body: tuple[Expression, ...]

    def __post_init__(self):
        object.__setattr__(self, "parameters", tuple(self.parameters))
        object.__setattr__(self, "body", tuple(self.body))

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda ")
            buffer.write(_write_list(self.parameters))
            buffer.write(" ")
            buffer.write(_write_list(self.body))
            buffer.write(")")
            return buffer.getvalue()


Expression = Union[Number, Symbol, List, Procedure]


def _write_list(items: Iterable[Expression]) -> str:
    return "(" + " ".join(str(item) for item in items) + ")"
