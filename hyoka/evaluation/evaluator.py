"""Core evaluator for the Hyoka interpreter.

Reduces an Expression against an Environment. A result of None means the form
produced no value. Failures come in two kinds:

- local (HyokaLocalError): malformed special forms, unknown procedures, arity
  mismatches. They are logged and the offending list form yields None.
- fatal (HyokaEvaluationError): evaluating (), non-numeric arithmetic operands,
  cyclic symbol bindings and runaway nesting. They abort the whole evaluation.
"""

from __future__ import annotations

import logging
from typing import Optional

from hyoka.config import get_max_depth
from hyoka.errors import (
    CyclicBinding,
    EmptyListEvaluation,
    HyokaLocalError,
    HyokaTypeError,
    NotAProcedure,
    RecursionDepthExceeded,
)
from hyoka.builtin.arithmetic import BUILTINS
from hyoka.evaluation.apply import apply_procedure
from hyoka.evaluation.special_forms import SPECIAL_FORMS
from hyoka.evaluation.state import EvalState
from hyoka.types.environment import Environment
from hyoka.types.expression import Expression, List, Number, Procedure
from hyoka.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(
    expr: Expression, env: Environment, *, max_depth: int | None = None
) -> Optional[Expression]:
    """
    Evaluate one top-level expression. `env` is mutated by `define`.
    """
    state = EvalState(max_depth if max_depth is not None else get_max_depth())
    try:
        return evaluate0(expr, env, state)
    except RecursionError as exc:
        # max_depth set above what the Python stack allows
        raise RecursionDepthExceeded("evaluation exhausted the Python stack") from exc


def evaluate0(expr: Expression, env: Environment, state: EvalState) -> Optional[Expression]:
    """
    Single evaluation step, sharing `state` with the enclosing evaluation.
    """
    state.enter()
    try:
        match expr:
            case Number():
                return expr
            case Symbol():
                return resolve_symbol(expr, env, state)
            case List():
                return evaluate_list(expr, env, state)
            case Procedure():
                # A procedure value reached without being called
                logger.debug("bare procedure %s evaluated; no value", expr)
                return None
        raise HyokaTypeError(f"cannot evaluate non-expression {expr!r}")
    finally:
        state.leave()


def resolve_symbol(symbol: Symbol, env: Environment, state: EvalState) -> Expression:
    """Follow `symbol`'s binding in `env` until it settles.

    Numbers and procedures are returned directly and an unbound name evaluates
    to itself. Symbol-to-symbol chains are walked in a loop; a List binding is
    evaluated while the names that led to it are marked as in progress, so a
    binding that reaches itself again raises CyclicBinding.
    """
    chain: list[Symbol] = []
    current = symbol
    while True:
        value = env.get(current)
        if value is None:
            return current
        if isinstance(value, (Number, Procedure)):
            return value

        if current in chain or (id(env), current) in state.resolving:
            path = " -> ".join(str(s) for s in [*chain, current])
            raise CyclicBinding(f"cyclic binding: {path}")
        chain.append(current)

        if isinstance(value, Symbol):
            current = value
            continue

        keys = {(id(env), s) for s in chain}
        state.resolving |= keys
        try:
            return evaluate0(value, env, state)
        finally:
            state.resolving -= keys


def evaluate_list(form: List, env: Environment, state: EvalState) -> Optional[Expression]:
    if not form.items:
        raise EmptyListEvaluation("attempting to evaluate an empty list")

    head, *tail = form.items
    try:
        if not isinstance(head, Symbol):
            # A nested form in head position is not evaluated.
            raise NotAProcedure(
                f"expected a symbol to name a procedure but found {head}"
            )

        builtin = BUILTINS.get(head)
        if builtin is not None:
            return builtin(env, (evaluate0(arg, env, state) for arg in tail))

        special = SPECIAL_FORMS.get(head)
        if special is not None:
            return special(tail, env, state, evaluate0)

        return apply_procedure(head, tail, env, state, evaluate0)
    except HyokaLocalError as exc:
        logger.info("%s: %s", type(exc).__name__, exc)
        return None
