"""Registry of special forms for the ListScript evaluator.

Maps node types to handler functions that implement non-standard evaluation
rules. The evaluator consults this table after the self-evaluating, symbol,
list and call cases.
"""

from listscript.types.node import Def, If
from listscript.evaluation.special_forms.define_form import define_form
from listscript.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Def: define_form,
    If: if_form,
}
