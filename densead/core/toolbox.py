# densead/core/toolbox.py

"""
Uniform math interface over plain numbers and Evaluations.

Numerical code written against the functions in this module (or against a
toolbox object returned by `toolbox_for`) runs unchanged on floats, on
Evaluations, and on nested Evaluations (AD of AD):

    from densead.core import toolbox as tb

    def density(p, T):
        return p / (287.05 * T) * tb.exp(-1e-4 * tb.sqrt(T))

    density(1e5, 300.0)                    # float
    density(x[0], x[1])                    # Evaluation with d/dp, d/dT

Plain numbers go to numpy ufuncs (results are numpy float64 scalars, so
domain errors give nan/inf with a RuntimeWarning instead of raising);
Evaluations go to the chain-rule implementations in `densead.ops`.
"""

from __future__ import annotations
import builtins
import functools
from dataclasses import dataclass
from typing import Any

import numpy as np
from scipy import special as _sp_special

from ..config import ADConfig
from .evaluation import Evaluation


def _is_floating_type(target) -> bool:
    return isinstance(target, type) and issubclass(target, (float, np.floating))


class ScalarToolbox:
    """Toolbox for plain floating point numbers."""

    value_type = float
    scalar_type = float
    nesting = 0

    def __repr__(self):
        return "ScalarToolbox()"

    def value(self, x):
        return x

    def scalar_value(self, x):
        return x

    def create_constant(self, value):
        return np.float64(value)

    def create_variable(self, value, var_idx: int):
        raise TypeError("Plain floating point objects cannot represent variables")

    def lift(self, value):
        return np.float64(value)

    def decay(self, target, x):
        if _is_floating_type(target):
            return target(x)
        raise TypeError(f"Cannot decay a plain number to {target!r}")

    def is_same(self, a, b, tolerance: float = ADConfig.DEFAULT_TOLERANCE) -> bool:
        return bool(a == b or builtins.abs(a - b) <= tolerance)

    # elementary functions
    def max(self, x1, x2):
        return np.float64(x1 if x1 > x2 else x2)

    def min(self, x1, x2):
        return np.float64(x1 if x1 < x2 else x2)

    def abs(self, x):
        return np.float64(-x if x < 0 else x)

    def tan(self, x):
        return np.tan(x)

    def atan(self, x):
        return np.arctan(x)

    def atan2(self, x, y):
        return np.arctan2(x, y)

    def sin(self, x):
        return np.sin(x)

    def asin(self, x):
        return np.arcsin(x)

    def cos(self, x):
        return np.cos(x)

    def acos(self, x):
        return np.arccos(x)

    def sqrt(self, x):
        return np.sqrt(x)

    def exp(self, x):
        return np.exp(x)

    def log(self, x):
        return np.log(x)

    def pow(self, base, exp):
        return np.power(np.float64(base), np.float64(exp))

    def erf(self, x):
        return np.float64(_sp_special.erf(x))


SCALAR_TOOLBOX = ScalarToolbox()


@dataclass(frozen=True)
class EvaluationToolbox:
    """
    Toolbox for Evaluations with `num_vars` derivatives whose values are
    handled by `inner` (the scalar toolbox, or another EvaluationToolbox when
    derivatives are nested).
    """
    num_vars: int
    inner: Any = SCALAR_TOOLBOX

    @property
    def value_type(self):
        return float if isinstance(self.inner, ScalarToolbox) else Evaluation

    @property
    def scalar_type(self):
        # innermost non-AD type, however deep the nesting
        return self.inner.scalar_type

    @property
    def nesting(self) -> int:
        """Number of Evaluation layers of the values this toolbox handles."""
        return 1 + self.inner.nesting

    def value(self, x: Evaluation):
        return x.value

    def scalar_value(self, x: Evaluation):
        return self.inner.scalar_value(x.value)

    def create_constant(self, value) -> Evaluation:
        zero = self.inner.create_constant(0.0)
        return Evaluation(self.inner.lift(value), [zero] * self.num_vars)

    def create_variable(self, value, var_idx: int) -> Evaluation:
        if not 0 <= var_idx < self.num_vars:
            raise IndexError(f"var_idx must be in [0, {self.num_vars}), got {var_idx}")
        derivatives = [
            self.inner.create_constant(1.0 if i == var_idx else 0.0)
            for i in range(self.num_vars)
        ]
        return Evaluation(self.inner.lift(value), derivatives)

    def lift(self, value) -> Evaluation:
        # shallower Evaluations are constants at this level
        if isinstance(value, Evaluation) and depth(value) == self.nesting:
            return value
        return self.create_constant(value)

    def decay(self, target, x: Evaluation):
        if isinstance(target, type) and issubclass(target, Evaluation):
            return x
        if _is_floating_type(target):
            return target(self.scalar_value(x))
        raise TypeError(
            f"Cannot decay an Evaluation to {target!r}; "
            f"target must be Evaluation or a floating point type"
        )

    def is_same(self, a: Evaluation, b: Evaluation,
                tolerance: float = ADConfig.DEFAULT_TOLERANCE) -> bool:
        # make sure that the values are identical
        if not self.inner.is_same(a.value, b.value, tolerance):
            return False
        if a.num_vars != b.num_vars:
            return False
        # ... and the derivatives
        for da, db in zip(a.derivatives, b.derivatives):
            if not self.inner.is_same(da, db, tolerance):
                return False
        return True

    # elementary functions, see densead.ops
    def max(self, x1, x2):
        from ..ops.special import max
        return max(x1, x2)

    def min(self, x1, x2):
        from ..ops.special import min
        return min(x1, x2)

    def abs(self, x):
        from ..ops.special import abs
        return abs(x)

    def tan(self, x):
        from ..ops.trigonometric import tan
        return tan(x)

    def atan(self, x):
        from ..ops.trigonometric import atan
        return atan(x)

    def atan2(self, x, y):
        from ..ops.trigonometric import atan2
        return atan2(x, y)

    def sin(self, x):
        from ..ops.trigonometric import sin
        return sin(x)

    def asin(self, x):
        from ..ops.trigonometric import asin
        return asin(x)

    def cos(self, x):
        from ..ops.trigonometric import cos
        return cos(x)

    def acos(self, x):
        from ..ops.trigonometric import acos
        return acos(x)

    def sqrt(self, x):
        from ..ops.transcendental import sqrt
        return sqrt(x)

    def exp(self, x):
        from ..ops.transcendental import exp
        return exp(x)

    def log(self, x):
        from ..ops.transcendental import log
        return log(x)

    def pow(self, base, exp):
        from ..ops.transcendental import pow
        return pow(base, exp)

    def erf(self, x):
        from ..ops.special import erf
        return erf(x)


@functools.lru_cache(maxsize=None)
def evaluation_toolbox(num_vars: int, inner=SCALAR_TOOLBOX) -> EvaluationToolbox:
    """Toolbox for Evaluations with `num_vars` derivatives over `inner` values."""
    return EvaluationToolbox(num_vars, inner)


def toolbox_for(x):
    """Return the toolbox matching the type of `x`."""
    if isinstance(x, Evaluation):
        return evaluation_toolbox(x.num_vars, toolbox_for(x.value))
    return SCALAR_TOOLBOX


def depth(x) -> int:
    """Number of Evaluation layers wrapped around the innermost scalar."""
    n = 0
    while isinstance(x, Evaluation):
        x = x.value
        n += 1
    return n


def _dispatch(*args):
    # the deepest Evaluation decides; plain numbers act as constants
    best, best_depth = args[0], depth(args[0])
    for a in args[1:]:
        d = depth(a)
        if d > best_depth:
            best, best_depth = a, d
    return toolbox_for(best)


# ----------------------------- generic interface ----------------------------- #
def value(x):
    """Value part of x; plain numbers pass through unchanged."""
    return toolbox_for(x).value(x)


def scalar_value(x):
    """Innermost scalar of x, unwrapping every Evaluation layer."""
    return toolbox_for(x).scalar_value(x)


def create_constant(value, num_vars: int):
    return evaluation_toolbox(num_vars).create_constant(value)


def create_variable(value, var_idx: int, num_vars: int):
    return evaluation_toolbox(num_vars).create_variable(value, var_idx)


def decay(target, x):
    """
    Convert x to `target`: the Evaluation class keeps x as is, a floating
    point type drops all derivatives. Anything else raises TypeError.
    """
    return toolbox_for(x).decay(target, x)


def is_same(a, b, tolerance: float = ADConfig.DEFAULT_TOLERANCE) -> bool:
    """Approximate equality of values and of every derivative component."""
    tb = _dispatch(a, b)
    if isinstance(tb, EvaluationToolbox):
        a, b = tb.lift(a), tb.lift(b)
    return tb.is_same(a, b, tolerance)


def max(x1, x2):
    return _dispatch(x1, x2).max(x1, x2)


def min(x1, x2):
    return _dispatch(x1, x2).min(x1, x2)


def abs(x):
    return toolbox_for(x).abs(x)


def tan(x):
    return toolbox_for(x).tan(x)


def atan(x):
    return toolbox_for(x).atan(x)


def atan2(x, y):
    return _dispatch(x, y).atan2(x, y)


def sin(x):
    return toolbox_for(x).sin(x)


def asin(x):
    return toolbox_for(x).asin(x)


def cos(x):
    return toolbox_for(x).cos(x)


def acos(x):
    return toolbox_for(x).acos(x)


def sqrt(x):
    return toolbox_for(x).sqrt(x)


def exp(x):
    return toolbox_for(x).exp(x)


def log(x):
    return toolbox_for(x).log(x)


def pow(base, exp):
    return _dispatch(base, exp).pow(base, exp)


def erf(x):
    return toolbox_for(x).erf(x)
