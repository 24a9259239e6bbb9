"""Registry of special forms for the Mallow evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application. Each handler receives the unevaluated operands, the
current environment and the evaluator, and returns a value or a TailCall.
"""

from mallow.types.symbol import Symbol
from mallow.evaluation.special_forms.define_form import define_form
from mallow.evaluation.special_forms.let_form import let_form
from mallow.evaluation.special_forms.do_form import do_form
from mallow.evaluation.special_forms.if_form import if_form
from mallow.evaluation.special_forms.fn_form import fn_form

SPECIAL_FORMS = {
    Symbol("def!"): define_form,
    Symbol("let*"): let_form,
    Symbol("do"): do_form,
    Symbol("if"): if_form,
    Symbol("fn*"): fn_form,
}
