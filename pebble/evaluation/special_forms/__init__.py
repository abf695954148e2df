"""Registry of special forms for the Pebble evaluator.

Maps names to handler functions that receive unevaluated arguments. The
bootstrap routine wraps each handler in a SpecialForm value and binds it in
the root environment, so special forms are looked up like any other name.
"""

from pebble.evaluation.special_forms.define_form import define_form
from pebble.evaluation.special_forms.let_form import let_form
from pebble.evaluation.special_forms.do_form import do_form
from pebble.evaluation.special_forms.if_form import if_form
from pebble.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    "def!": define_form,
    "let*": let_form,
    "do": do_form,
    "if": if_form,
    "fn*": lambda_form,
}
