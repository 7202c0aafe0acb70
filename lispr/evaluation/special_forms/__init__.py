"""Registry of special forms for the lispr evaluator.

Maps Symbols to Builtin entries whose handlers receive their arguments
unevaluated. The evaluator consults this table (through lispr.builtins)
before ordinary function application.
"""

from lispr.types.builtin import special
from lispr.types.symbol import Symbol
from lispr.evaluation.special_forms.progn_form import progn_form
from lispr.evaluation.special_forms.eval_form import eval_form
from lispr.evaluation.special_forms.quote_forms import quote_form
from lispr.evaluation.special_forms.lambda_form import lambda_form
from lispr.evaluation.special_forms.define_form import define_form, undef_form
from lispr.evaluation.special_forms.let_form import let_form
from lispr.evaluation.special_forms.if_form import if_form
from lispr.evaluation.special_forms.cond_form import cond_form
from lispr.evaluation.special_forms.env_forms import env_form, type_form

SPECIAL_FORMS = {
    Symbol("define"): special("define", define_form, nargs=2),
    Symbol("undef"): special("undef", undef_form, nargs=1),
    Symbol("let"): special("let", let_form, nargs=2),
    Symbol("lambda"): special("lambda", lambda_form, nargs=2),
    Symbol("if"): special("if", if_form, nargs=3),
    Symbol("cond"): special("cond", cond_form, min_args=1, arg_noun="branch"),
    Symbol("type"): special("type", type_form, nargs=1),
    Symbol("quote"): special("quote", quote_form, nargs=1),
    Symbol("eval"): special("eval", eval_form, nargs=1),
    Symbol("env"): special("env", env_form, nargs=0),
    Symbol("begin"): special("begin", progn_form),
}
