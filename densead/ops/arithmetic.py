# densead/ops/arithmetic.py
import numpy as np
from ..core.evaluation import Evaluation
from ..core import toolbox as tb_mod  # module access, toolbox imports ops lazily

_NUMBER_TYPES = (int, float, np.integer, np.floating)


def _check_operand(x, tag):
    if not isinstance(x, (Evaluation,) + _NUMBER_TYPES):
        raise TypeError(f"{tag}: unsupported operand type {type(x)}")


def _require_ad(x, tag):
    """Elementary functions here are AD-only; plain numbers go through the toolbox."""
    if not isinstance(x, Evaluation):
        raise TypeError(
            f"{tag} expects an Evaluation, but got {type(x)}; "
            f"use densead.core.toolbox.{tag} for plain numbers"
        )


def _same_layout(x, y, tag):
    """Both operands must share one derivative vector; it is never broadcast."""
    if x.num_vars != y.num_vars:
        raise ValueError(
            f"{tag}: operands have {x.num_vars} and {y.num_vars} derivatives"
        )


def _active(x, y):
    """
    Which operands carry derivatives at the outermost level.

    The deeper operand is the active one; a shallower Evaluation or a plain
    number acts as a constant of the deeper operand's value type.
    """
    dx, dy = tb_mod.depth(x), tb_mod.depth(y)
    top = max(dx, dy)
    return (top > 0 and dx == top), (top > 0 and dy == top)


def _chain(x, value, df_dx):
    """Unary chain rule: derivatives of f(x) are f'(x.value) * x.derivatives."""
    return Evaluation(value, x.derivatives * df_dx)


def _binary(x, y, tag, both, left, right, plain):
    """
    Generic binary primitive:
      - both  : rule when x and y are active Evaluations
      - left  : rule when only x is active (y constant)
      - right : rule when only y is active (x constant)
      - plain : rule for two plain numbers
    """
    _check_operand(x, tag)
    _check_operand(y, tag)
    x_ad, y_ad = _active(x, y)
    if x_ad and y_ad:
        _same_layout(x, y, tag)
        return both(x, y)
    if x_ad:
        return left(x, y)
    if y_ad:
        return right(x, y)
    return plain(x, y)


def add(x, y):
    return _binary(
        x, y, "add",
        lambda a, b: Evaluation(a.value + b.value, a.derivatives + b.derivatives),
        lambda a, b: Evaluation(a.value + b, a.derivatives),
        lambda a, b: Evaluation(a + b.value, b.derivatives),
        lambda a, b: a + b,
    )


def sub(x, y):
    return _binary(
        x, y, "sub",
        lambda a, b: Evaluation(a.value - b.value, a.derivatives - b.derivatives),
        lambda a, b: Evaluation(a.value - b, a.derivatives),
        lambda a, b: Evaluation(a - b.value, -b.derivatives),
        lambda a, b: a - b,
    )


def mul(x, y):
    # d(x*y) = x' * y + x * y'
    return _binary(
        x, y, "mul",
        lambda a, b: Evaluation(a.value * b.value,
                                a.derivatives * b.value + b.derivatives * a.value),
        lambda a, b: Evaluation(a.value * b, a.derivatives * b),
        lambda a, b: Evaluation(a * b.value, b.derivatives * a),
        lambda a, b: a * b,
    )


def _div_both(a, b):
    # d(x/y) = (x' * y - x * y') / y^2
    yv = b.value
    return Evaluation(a.value / yv,
                      (a.derivatives * yv - b.derivatives * a.value) / (yv * yv))


def _div_right(a, b):
    # d(c/y) = -c * y' / y^2
    yv = b.value
    return Evaluation(a / yv, b.derivatives * (-a / (yv * yv)))


def div(x, y):
    return _binary(
        x, y, "div",
        _div_both,
        lambda a, b: Evaluation(a.value / b, a.derivatives / b),
        _div_right,
        lambda a, b: a / b,
    )


def neg(x):
    """Flip the sign of the value and of every derivative component."""
    _require_ad(x, "neg")
    return Evaluation(-x.value, -x.derivatives)
