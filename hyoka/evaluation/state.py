from __future__ import annotations

from typing import Callable, Optional

from hyoka.errors import RecursionDepthExceeded
from hyoka.types.environment import Environment
from hyoka.types.expression import Expression
from hyoka.types.symbol import Symbol


class EvalState:
    """Per-call bookkeeping for one top-level evaluation."""

    __slots__ = ("depth", "max_depth", "resolving")

    def __init__(self, max_depth: int):
        self.depth = 0
        self.max_depth = max_depth
        # (id(environment), symbol) pairs whose bindings are being evaluated
        self.resolving: set[tuple[int, Symbol]] = set()

    def enter(self) -> None:
        self.depth += 1
        if self.depth > self.max_depth:
            self.depth -= 1
            raise RecursionDepthExceeded(
                f"evaluation nested deeper than {self.max_depth} levels"
            )

    def leave(self) -> None:
        self.depth -= 1


# Evaluator function type passed into special forms and procedure application
EvaluatorFn = Callable[[Expression, Environment, EvalState], Optional[Expression]]
