from hyoka.types.symbol import Symbol
from hyoka.types.expression import Expression, List, Number, Procedure
from hyoka.types.environment import Environment

__all__ = ["Symbol", "Expression", "List", "Number", "Procedure", "Environment"]
