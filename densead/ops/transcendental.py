# densead/ops/transcendental.py
from ..core.evaluation import Evaluation
from ..core import toolbox as tb_mod  # module access, toolbox imports ops lazily
from .arithmetic import _active, _chain, _check_operand, _require_ad, _same_layout


def exp(x):
    _require_ad(x, "exp")
    inner = tb_mod.toolbox_for(x.value)
    ex = inner.exp(x.value)
    return _chain(x, ex, ex)


def log(x):
    # x.value == 0 gives -inf and infinite derivatives
    _require_ad(x, "log")
    inner = tb_mod.toolbox_for(x.value)
    return _chain(x, inner.log(x.value), 1 / x.value)


def sqrt(x):
    _require_ad(x, "sqrt")
    inner = tb_mod.toolbox_for(x.value)
    s = inner.sqrt(x.value)
    return _chain(x, s, 0.5 / s)


def _zero_like(x):
    # value 0, all derivatives 0
    return tb_mod.toolbox_for(x).create_constant(0.0)


def _pow_const_exp(base, exp):
    """
    base ** c for a constant exponent c:
        d/dv = (base^c / base) * c * base'
    """
    # A zero base is valid but the generic rule divides by it; the whole
    # result is forced to zero instead, whatever the exponent.
    if base == 0.0:
        return _zero_like(base)
    inner = tb_mod.toolbox_for(base.value)
    pow_x = inner.pow(base.value, exp)
    df_dx = pow_x / base.value * exp
    return _chain(base, pow_x, df_dx)


def _pow_const_base(base, exp):
    """
    c ** exp for a constant base c, evaluated as exp(log(c) * exp):
        d/dv = log(c) * c^exp * exp'
    """
    if base == 0.0:
        return _zero_like(exp)
    inner = tb_mod.toolbox_for(exp.value)
    ln_base = tb_mod.toolbox_for(base).log(base)
    value = inner.exp(ln_base * exp.value)
    return _chain(exp, value, ln_base * value)


def _pow_both(base, exp):
    """
    base ** exp with both operands carrying derivatives:
        d/dv = (g * f' / f + log(f) * g') * f^g,   f = base, g = exp

    The most expensive variant; prefer a constant operand when one of them
    does not depend on the variables.
    """
    _same_layout(base, exp, "pow")
    if base == 0.0:
        return _zero_like(base)
    inner = tb_mod.toolbox_for(base.value)
    f, g = base.value, exp.value
    value_pow = inner.pow(f, g)
    log_f = inner.log(f)
    derivatives = (base.derivatives * g / f + exp.derivatives * log_f) * value_pow
    return Evaluation(value_pow, derivatives)


def pow(base, exp):
    """
    Power with the rule chosen by which operands carry derivatives:
      - Evaluation ** number     : constant exponent
      - number ** Evaluation     : constant base
      - Evaluation ** Evaluation : both vary
      - number ** number         : plain numpy power

    A base whose value is exactly 0 gives the all-zero Evaluation (value 0,
    derivatives 0) in every variant, even for negative or fractional
    exponents.
    """
    _check_operand(base, "pow")
    _check_operand(exp, "pow")
    base_ad, exp_ad = _active(base, exp)
    if base_ad and exp_ad:
        return _pow_both(base, exp)
    if base_ad:
        return _pow_const_exp(base, exp)
    if exp_ad:
        return _pow_const_base(base, exp)
    return tb_mod.SCALAR_TOOLBOX.pow(base, exp)
