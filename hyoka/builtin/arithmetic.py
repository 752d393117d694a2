"""Arithmetic built-ins for the Hyoka evaluator.

Each operator is a left fold over its operands starting from a fixed seed:
0.0 for + and -, 1.0 for * and /. So (- 3) is 0 - 3 and (/ 4) is 1 / 4.
Operands arrive lazily, already evaluated, in source order; the first one that
is not a Number aborts the evaluation with HyokaTypeError.
"""
from __future__ import annotations

import math
import operator
from typing import Callable, Iterable, Optional

from hyoka.errors import HyokaTypeError
from hyoka.types.environment import Environment
from hyoka.types.expression import Expression, Number
from hyoka.types.symbol import Symbol

BuiltinFn = Callable[[Environment, Iterable[Optional[Expression]]], Expression]


def ieee_div(a: float, b: float) -> float:
    """a / b with IEEE-754 results for a zero divisor instead of ZeroDivisionError."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def fold(
    name: str,
    seed: float,
    op: Callable[[float, float], float],
    args: Iterable[Optional[Expression]],
) -> Number:
    acc = seed
    for position, value in enumerate(args, start=1):
        if not isinstance(value, Number):
            shown = "no value" if value is None else str(value)
            raise HyokaTypeError(
                f"operand {position} of {name} must evaluate to a number, got {shown}"
            )
        acc = op(acc, value.value)
    return Number(acc)


def add(env: Environment, args: Iterable[Optional[Expression]]) -> Number:
    return fold("+", 0.0, operator.add, args)


def sub(env: Environment, args: Iterable[Optional[Expression]]) -> Number:
    return fold("-", 0.0, operator.sub, args)


def mul(env: Environment, args: Iterable[Optional[Expression]]) -> Number:
    return fold("*", 1.0, operator.mul, args)


def div(env: Environment, args: Iterable[Optional[Expression]]) -> Number:
    return fold("/", 1.0, ieee_div, args)


BUILTINS: dict[Symbol, BuiltinFn] = {
    Symbol("+"): add,
    Symbol("-"): sub,
    Symbol("*"): mul,
    Symbol("/"): div,
}
