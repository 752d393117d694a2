class HyokaError(Exception):
    """ Base class for all Hyoka errors"""
    pass

class HyokaInvalidSymbol(HyokaError):
    """ Raised when something other than a Symbol is used as a binding name"""
    pass

# --- Reader ---

class HyokaSyntaxError(HyokaError):
    """ Raised when the token stream does not form an expression"""

class UnexpectedEOF(HyokaSyntaxError):
    """ Raised when input ends while an expression is still expected"""

class UnexpectedCloseParen(HyokaSyntaxError):
    """ Raised when ')' appears where an expression is expected"""

class NestingTooDeep(HyokaSyntaxError):
    """ Raised when lists are nested deeper than the configured limit"""

# --- Evaluation, fatal: aborts the current evaluation ---

class HyokaEvaluationError(HyokaError):
    """ Base class for failures surfaced to the caller of evaluate"""

class EmptyListEvaluation(HyokaEvaluationError):
    """ Raised when () is evaluated"""

class CyclicBinding(HyokaEvaluationError):
    """ Raised when a symbol's binding leads back to itself"""

class HyokaTypeError(HyokaEvaluationError):
    """ Raised when an arithmetic operand is not a number"""

class RecursionDepthExceeded(HyokaEvaluationError):
    """ Raised when evaluation nests deeper than the configured limit"""

# --- Evaluation, local: the form yields no value ---

class HyokaLocalError(HyokaError):
    """ Base class for failures that make a form produce no value"""

class NotAProcedure(HyokaLocalError):
    """ Raised when a list's head is not a symbol"""

class MalformedSpecialForm(HyokaLocalError):
    """ Raised when lambda or define is used with the wrong shape"""

class UnknownProcedure(HyokaLocalError):
    """ Raised when a call names something that is not a procedure"""

class HyokaArityError(HyokaLocalError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

class MissingValue(HyokaLocalError):
    """ Raised when a procedure argument produces no value"""
