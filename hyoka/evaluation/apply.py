"""Application of user procedures.

A call `(name arg...)` runs the named Procedure's body in a brand-new frame
that holds only the parameter bindings. The frame has no parent: the body
cannot see the caller's bindings or the global environment, only the
arithmetic built-ins and special forms, which are resolved by name before any
lookup happens. Procedures therefore do not close over anything and cannot
call other user procedures unless they receive them as arguments.
"""

from __future__ import annotations

import logging
from typing import Optional

from hyoka.errors import HyokaArityError, MissingValue, UnknownProcedure
from hyoka.evaluation.state import EvalState, EvaluatorFn
from hyoka.types.environment import Environment
from hyoka.types.expression import Expression, List, Procedure
from hyoka.types.symbol import Symbol

logger = logging.getLogger(__name__)


def bind_arguments(
    name: Symbol,
    fn: Procedure,
    arg_forms: list[Expression],
    caller_env: Environment,
    state: EvalState,
    evaluate_fn: EvaluatorFn,
) -> Environment:
    """Evaluate the arguments in the caller's environment and bind them in a new frame."""
    if len(arg_forms) != fn.arity:
        raise HyokaArityError(
            f"'{name}' expects {fn.arity} argument(s) but was given {len(arg_forms)}"
        )
    frame = Environment.new_empty()
    for param, arg in zip(fn.parameters, arg_forms):
        value = evaluate_fn(arg, caller_env, state)
        if value is None:
            raise MissingValue(f"argument {arg} for parameter {param} of '{name}' produced no value")
        frame.set(param, value)
    return frame


def apply_procedure(
    name: Symbol,
    arg_forms: list[Expression],
    env: Environment,
    state: EvalState,
    evaluate_fn: EvaluatorFn,
) -> Optional[Expression]:
    fn = env.get(name)
    if not isinstance(fn, Procedure):
        raise UnknownProcedure(f"unknown procedure '{name}' invoked")

    frame = bind_arguments(name, fn, arg_forms, env, state, evaluate_fn)
    logger.debug("calling %s with %s", name, frame)
    return evaluate_fn(List(fn.body), frame, state)
