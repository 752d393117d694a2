from __future__ import annotations

from hyoka.types.expression import Expression, List, Number, Procedure
from hyoka.types.symbol import Symbol

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_NUMBER = "\033[93m"
COLOR_SYMBOL = "\033[94m"
COLOR_PROCEDURE = "\033[92m"
COLOR_SPECIAL_FORM = "\033[90m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_line_length": 80,
    "color": False,
}

SPECIAL_FORMS = {"define", "lambda"}


def to_source(expr: Expression) -> str:
    """Plain text that parses back to an equal expression."""
    return str(expr)


# ----------------- Colorize utility -----------------
def colorize(expr: Expression) -> str:
    if isinstance(expr, Number):
        return f"{COLOR_NUMBER}{expr}{RESET}"
    if isinstance(expr, Symbol):
        color = COLOR_SPECIAL_FORM if expr.name in SPECIAL_FORMS else COLOR_SYMBOL
        return f"{color}{expr}{RESET}"
    if isinstance(expr, Procedure):
        return f"{COLOR_PROCEDURE}{expr}{RESET}"
    if isinstance(expr, List):
        return "(" + " ".join(colorize(e) for e in expr) + ")"
    return str(expr)


# ----------------- Pretty printer -----------------
def pprint_expr(expr: Expression, indent: int = 0, options: dict = DEFAULT_OPTIONS) -> str:
    """Render `expr`, breaking lists that do not fit on one line.

    Long lists put the head on the opening line and each remaining element on
    its own line, indented one level deeper.
    """
    color = options.get("color", False)
    if not isinstance(expr, List):
        return colorize(expr) if color else to_source(expr)
    if not expr.items:
        return "()"

    single_line = colorize(expr) if color else to_source(expr)
    # ANSI escapes do not take up columns
    if len(to_source(expr)) + indent * 2 <= options.get("max_line_length", 80):
        return single_line

    parts = [pprint_expr(e, indent + 1, options) for e in expr]
    lines = ["(" + parts[0]]
    for part in parts[1:]:
        lines.append("  " * (indent + 1) + part)
    lines[-1] += ")"
    return "\n".join(lines)
