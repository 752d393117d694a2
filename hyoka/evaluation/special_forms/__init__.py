"""Registry of special forms for the Hyoka evaluator.

Maps Symbols to handler functions that receive their operands unevaluated.
The evaluator consults this table after the arithmetic built-ins and before
user procedure calls.
"""

from hyoka.types.symbol import Symbol
from hyoka.evaluation.special_forms.lambda_form import lambda_form
from hyoka.evaluation.special_forms.define_form import define_form

SPECIAL_FORMS = {
    Symbol("lambda"): lambda_form,
    Symbol("define"): define_form,
}
