from __future__ import annotations

import logging
from typing import Optional

from hyoka.errors import MalformedSpecialForm
from hyoka.evaluation.state import EvalState, EvaluatorFn
from hyoka.types.environment import Environment
from hyoka.types.expression import Expression
from hyoka.types.symbol import Symbol

logger = logging.getLogger(__name__)


def define_form(
    tail: list[Expression],
    env: Environment,
    state: EvalState,
    evaluate_fn: EvaluatorFn,
) -> Optional[Expression]:
    """
    (define name value)
    Binds name in `env` and never produces a value itself. When the value
    expression yields nothing, the environment is left as it was.
    """
    if len(tail) != 2:
        raise MalformedSpecialForm("`define` takes (<name> <expression>)")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise MalformedSpecialForm(f"a definition's name must be a symbol, got {name}")

    value = evaluate_fn(val_expr, env, state)
    if value is None:
        logger.info("definition of %s produced no value; nothing was bound", name)
        return None
    env.set(name, value)
    logger.debug("defined %s = %s", name, value)
    return None
