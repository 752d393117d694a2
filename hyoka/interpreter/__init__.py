from __future__ import annotations

import logging
from collections import deque
from pathlib import Path
from typing import Iterator, Optional

from hyoka.config import get_max_depth
from hyoka.evaluation.evaluator import evaluate
from hyoka.reader.parser import TokenStream, tokenize
from hyoka.types.environment import Environment
from hyoka.types.expression import Expression

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Hyoka code.
    Keeps one global Environment alive across calls so definitions persist.
    """

    def __init__(
        self,
        env: Environment | None = None,
        *,
        max_depth: int | None = None,
    ):
        self.env: Environment = env if env is not None else Environment.new_empty()
        self.max_depth: int = max_depth if max_depth is not None else get_max_depth()

    def _stream(self, code: str) -> TokenStream:
        return TokenStream(deque(tokenize(code)), self.max_depth)

    def parse(self, code: str) -> Expression:
        return self._stream(code).parse_expr()

    def eval(self, code: str) -> Optional[Expression]:
        """Parse the first form in `code` and evaluate it.

        Syntax errors are raised before anything is evaluated, leaving the
        environment untouched.
        """
        stream = self._stream(code)
        expr = stream.parse_expr()
        if stream.remaining:
            logger.warning("ignoring %d token(s) after the first form", stream.remaining)
        return evaluate(expr, self.env, max_depth=self.max_depth)

    def eval_iter(self, code: str) -> Iterator[Optional[Expression]]:
        """Evaluate the top-level forms in `code` one at a time.

        Each result is yielded before the next form is read, so the results of
        earlier forms are not lost when a later one fails.
        """
        for expr in self._stream(code).parse_all():
            yield evaluate(expr, self.env, max_depth=self.max_depth)

    def eval_all(self, code: str) -> list[Optional[Expression]]:
        """Evaluate every top-level form in `code`, in order."""
        return list(self.eval_iter(code))

    def eval_file(self, path: str | Path) -> list[Optional[Expression]]:
        return self.eval_all(Path(path).read_text(encoding="utf-8"))
