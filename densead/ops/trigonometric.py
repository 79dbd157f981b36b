# densead/ops/trigonometric.py
from ..core.evaluation import Evaluation
from ..core import toolbox as tb_mod  # module access, toolbox imports ops lazily
from .arithmetic import _active, _chain, _require_ad, _same_layout


def sin(x):
    _require_ad(x, "sin")
    inner = tb_mod.toolbox_for(x.value)
    return _chain(x, inner.sin(x.value), inner.cos(x.value))


def cos(x):
    _require_ad(x, "cos")
    inner = tb_mod.toolbox_for(x.value)
    return _chain(x, inner.cos(x.value), -inner.sin(x.value))


def tan(x):
    # d/dx tan(x) = 1 + tan(x)^2
    _require_ad(x, "tan")
    inner = tb_mod.toolbox_for(x.value)
    tmp = inner.tan(x.value)
    return _chain(x, tmp, 1 + tmp * tmp)


def asin(x):
    # undefined outside [-1, 1]: value and derivatives become nan
    _require_ad(x, "asin")
    inner = tb_mod.toolbox_for(x.value)
    v = x.value
    return _chain(x, inner.asin(v), 1.0 / inner.sqrt(1 - v * v))


def acos(x):
    _require_ad(x, "acos")
    inner = tb_mod.toolbox_for(x.value)
    v = x.value
    return _chain(x, inner.acos(v), -1.0 / inner.sqrt(1 - v * v))


def atan(x):
    _require_ad(x, "atan")
    inner = tb_mod.toolbox_for(x.value)
    v = x.value
    return _chain(x, inner.atan(v), 1 / (1 + v * v))


def atan2(x, y):
    """
    Two-argument arctangent atan2(x, y) = atan(x / y) in the correct quadrant.

    Derivative (quotient rule through atan):
        d/dv atan2 = 1 / (1 + (x/y)^2) * (x' * y - x * y') / y^2

    y.value == 0 is not special-cased. A plain-number operand is treated as
    a constant.
    """
    x_ad, y_ad = _active(x, y)
    if not (x_ad or y_ad):
        return tb_mod.SCALAR_TOOLBOX.atan2(x, y)
    if not x_ad:
        x = tb_mod.toolbox_for(y).create_constant(x)
    if not y_ad:
        y = tb_mod.toolbox_for(x).create_constant(y)
    _same_layout(x, y, "atan2")

    inner = tb_mod.toolbox_for(x.value)
    xv, yv = x.value, y.value
    alpha = 1 / (1 + (xv * xv) / (yv * yv))
    derivatives = (x.derivatives * yv - y.derivatives * xv) * (alpha / (yv * yv))
    return Evaluation(inner.atan2(xv, yv), derivatives)
