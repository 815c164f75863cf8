"""Registry of special forms for the currylisp evaluator.

Special forms are natives that receive their argument expressions
unevaluated. They live in the root environment like every other primitive,
so user code may shadow them.
"""

from currylisp.types.native_fn import NativeFunction
from currylisp.types.symbol import Symbol
from currylisp.evaluation.special_forms.set_form import setq_form
from currylisp.evaluation.special_forms.progn_form import progn_form
from currylisp.evaluation.special_forms.defmacro_form import defmacro_form
from currylisp.evaluation.special_forms.quote_forms import quote_form
from currylisp.evaluation.special_forms.lambda_form import lambda_form, macro_form
from currylisp.evaluation.special_forms.define_form import defun_form
from currylisp.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("lambda"): lambda_form,
    Symbol("macro"): macro_form,
    Symbol("defun"): defun_form,
    Symbol("defmacro"): defmacro_form,
    Symbol("setq"): setq_form,
    Symbol("progn"): progn_form,
}


def register(env) -> None:
    env.update({
        name: NativeFunction(name.id, handler, raw_args=True)
        for name, handler in SPECIAL_FORMS.items()
    })
