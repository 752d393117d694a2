from __future__ import annotations

from typing import Optional

from hyoka.errors import MalformedSpecialForm
from hyoka.evaluation.state import EvalState, EvaluatorFn
from hyoka.types.environment import Environment
from hyoka.types.expression import Expression, List, Procedure
from hyoka.types.symbol import Symbol


def lambda_form(
    tail: list[Expression],
    env: Environment,
    state: EvalState,
    evaluate_fn: EvaluatorFn,
) -> Optional[Expression]:
    """
    (lambda (params...) (body...))
    The body is kept unevaluated; it runs as a single form at call time.
    """
    if len(tail) != 2:
        raise MalformedSpecialForm("`lambda` expects (<parameters> <body>)")

    params, body = tail
    if not isinstance(params, List):
        raise MalformedSpecialForm("a `lambda`'s parameters must be a list of symbols")
    for param in params:
        if not isinstance(param, Symbol):
            raise MalformedSpecialForm(f"invalid expression for a symbol in parameters: {param}")
    if not isinstance(body, List):
        raise MalformedSpecialForm("a `lambda`'s body must be a list of expressions")

    return Procedure(params.items, body.items)
