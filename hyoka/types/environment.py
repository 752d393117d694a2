"""Runtime environment for Hyoka.

The Environment stores bindings of Symbols to Expressions. There is no `outer`
link: the global environment lives for the whole session, and every procedure
call gets a fresh, unchained frame holding only its parameters.

An Environment is not synchronized; evaluating against the same instance from
several threads at once is not supported.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from hyoka.errors import HyokaInvalidSymbol, HyokaTypeError
from hyoka.types.expression import Expression
from hyoka.types.symbol import Symbol


class Environment:
    """Flat mapping from Symbols to bound Expressions."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Optional[dict[Symbol, Expression]] = None):
        self.vars: dict[Symbol, Expression] = {}
        if bindings:
            self.update(bindings)

    @classmethod
    def new_empty(cls) -> Environment:
        """Fresh environment with no bindings, used for call frames."""
        return cls()

    def get(self, name: Symbol) -> Optional[Expression]:
        """Return the value bound to `name`, or None when unbound.

        The bound value is returned as-is; nested List/Procedure payloads are
        shared with the environment, not copied.
        """
        return self.vars.get(name)

    def set(self, name: Symbol, value: Expression) -> None:
        """Bind `name` to `value`, replacing any previous binding.

        Raises HyokaInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise HyokaInvalidSymbol(f"Cannot define {name} as a symbol")
        if value is None:
            raise HyokaTypeError(f"Cannot bind {name} to no value")
        self.vars[name] = value

    def update(self, mapping: dict[Symbol, Expression]) -> None:
        """Bulk-set a mapping of Symbol -> value."""
        for k, v in mapping.items():
            self.set(k, v)

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"
