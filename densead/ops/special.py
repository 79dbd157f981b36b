# densead/ops/special.py
import math
from ..core.evaluation import Evaluation
from ..core import toolbox as tb_mod  # module access, toolbox imports ops lazily
from .arithmetic import _active, _chain, _require_ad, _same_layout

TWO_OVER_SQRT_PI = 2.0 / math.sqrt(math.pi)


def abs(x):
    """
    Absolute value: derivatives flip sign where the value is negative.
    The kink at 0 is not special-cased (0 keeps the derivatives unchanged).
    """
    _require_ad(x, "abs")
    if x.value < 0.0:
        return Evaluation(-x.value, -x.derivatives)
    return Evaluation(x.value, x.derivatives)


def min(x1, x2):
    """
    Smaller of x1 and x2, carrying the derivatives of whichever wins.

    Ties go to x2. A plain number that wins yields a constant (zero
    derivatives); min(x1, c) is the same as min(c, x1).
    """
    x1_ad, x2_ad = _active(x1, x2)
    if x1_ad and x2_ad:
        _same_layout(x1, x2, "min")
        winner = x1 if x1.value < x2.value else x2
        return Evaluation(winner.value, winner.derivatives)
    if x1_ad:
        return min(x2, x1)
    if not x2_ad:
        return tb_mod.SCALAR_TOOLBOX.min(x1, x2)

    if x1 < x2.value:
        return tb_mod.toolbox_for(x2).create_constant(x1)
    return Evaluation(x2.value, x2.derivatives)


def max(x1, x2):
    """Larger of x1 and x2; same derivative ownership rules as `min`."""
    x1_ad, x2_ad = _active(x1, x2)
    if x1_ad and x2_ad:
        _same_layout(x1, x2, "max")
        winner = x1 if x1.value > x2.value else x2
        return Evaluation(winner.value, winner.derivatives)
    if x1_ad:
        return max(x2, x1)
    if not x2_ad:
        return tb_mod.SCALAR_TOOLBOX.max(x1, x2)

    if x1 > x2.value:
        return tb_mod.toolbox_for(x2).create_constant(x1)
    return Evaluation(x2.value, x2.derivatives)


def erf(x):
    """
    Error function: erf(x) = (2/√π) ∫₀ˣ e^(-t²) dt

    Derivative: d/dx erf(x) = (2/√π) * e^(-x²)
    """
    _require_ad(x, "erf")
    inner = tb_mod.toolbox_for(x.value)
    v = x.value
    df_dx = inner.exp(-(v * v)) * TWO_OVER_SQRT_PI
    return _chain(x, inner.erf(v), df_dx)
