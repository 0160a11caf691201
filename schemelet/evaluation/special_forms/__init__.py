"""Registry of special forms for the evaluator.

Maps Symbols to handlers that receive their operand slot unevaluated. The
evaluator consults this table before building an argument list.
"""

from schemelet.types import Symbol
from schemelet.evaluation.special_forms.quote_forms import quote_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
}
