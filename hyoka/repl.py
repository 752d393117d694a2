"""
Line-oriented read-eval-print loop for Hyoka.

Each input line is one form. The loop is stateless apart from the Interpreter
it drives, which keeps the global environment so definitions persist between
lines. `exit`/`quit` end the session and `clear` clears the screen.
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable, Optional, TextIO

from hyoka.config import (
    DEFAULT_CLEAR_COMMANDS,
    get_color,
    get_exit_commands,
    get_prompt,
)
from hyoka.debug_utils.pprint import DEFAULT_OPTIONS, pprint_expr
from hyoka.errors import HyokaEvaluationError, HyokaSyntaxError
from hyoka.interpreter import Interpreter

logger = logging.getLogger(__name__)

NO_RESULT = "; no result"
CLEAR_SCREEN = "\033[2J\033[H"


class Repl:
    def __init__(
        self,
        interpreter: Optional[Interpreter] = None,
        *,
        prompt: Optional[str] = None,
        exit_commands: Optional[Iterable[str]] = None,
        clear_commands: Iterable[str] = DEFAULT_CLEAR_COMMANDS,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        color: Optional[bool] = None,
    ):
        self.interp = interpreter if interpreter is not None else Interpreter()
        self.prompt = prompt if prompt is not None else get_prompt()
        self.exit_commands = set(exit_commands if exit_commands is not None else get_exit_commands())
        self.clear_commands = set(clear_commands)
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        color = get_color() if color is None else color
        self.print_options = {**DEFAULT_OPTIONS, "color": color}

    def render(self, result) -> str:
        if result is None:
            return NO_RESULT
        return pprint_expr(result, options=self.print_options)

    def handle(self, line: str) -> Optional[str]:
        """Evaluate one line and return the text to show, or None for nothing."""
        line = line.strip()
        if not line:
            return None
        if line in self.clear_commands:
            return CLEAR_SCREEN
        try:
            result = self.interp.eval(line)
        except HyokaSyntaxError as e:
            return f"parse error: {e}"
        except HyokaEvaluationError as e:
            logger.debug("evaluation of %r failed", line, exc_info=True)
            return f"error: {e}"
        return self.render(result)

    def run(self) -> None:
        while True:
            self.stdout.write(self.prompt)
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                # EOF
                self.stdout.write("\n")
                break
            if line.strip() in self.exit_commands:
                break
            out = self.handle(line)
            if out is None:
                continue
            if out == CLEAR_SCREEN:
                self.stdout.write(out)
            else:
                self.stdout.write(out + "\n")
            self.stdout.flush()
