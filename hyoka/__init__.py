# Hyoka: a minimal symbolic-expression interpreter.
#
# Text is tokenized, parsed into Expression nodes (Number, Symbol, List,
# Procedure) and evaluated against a mutable Environment:
#
#     env = Environment.new_empty()
#     evaluate(parse("(define sum (lambda (a b) (+ a b)))"), env)
#     evaluate(parse("(sum 3 4)"), env)   # -> Number(7.0)
#
# evaluate() returns None when a form produces no value; fatal failures raise
# HyokaEvaluationError subclasses, malformed input raises HyokaSyntaxError.

from hyoka.types.symbol import Symbol
from hyoka.types.expression import Expression, List, Number, Procedure
from hyoka.types.environment import Environment
from hyoka.reader.parser import parse, parse_tokens, tokenize
from hyoka.evaluation.evaluator import evaluate
from hyoka.interpreter import Interpreter

__version__ = "0.1.0"

__all__ = [
    "Symbol",
    "Expression",
    "List",
    "Number",
    "Procedure",
    "Environment",
    "parse",
    "parse_tokens",
    "tokenize",
    "evaluate",
    "Interpreter",
]
