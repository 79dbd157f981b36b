# densead/core/evaluation.py
from __future__ import annotations
import numpy as np
from typing import Any, Iterable


def _pack_derivatives(derivatives: Iterable[Any]) -> np.ndarray:
    """
    Copy derivative components into a frozen 1-D array.

    Plain numbers give a float64 array; inner Evaluations (nested AD) are kept
    in an object array so that numpy hands elementwise work back to them.
    """
    items = list(derivatives)
    if any(isinstance(d, Evaluation) for d in items):
        packed = np.empty(len(items), dtype=object)
        for i, d in enumerate(items):
            packed[i] = d
    else:
        packed = np.array(items, dtype=np.float64)
    packed.flags.writeable = False
    return packed


class Evaluation:
    """
    Dense forward-mode AD value.

    Attributes
    ----------
    value : np.float64 | Evaluation
        Primal value. A numpy scalar, so division by zero gives inf/nan
        instead of raising; an inner Evaluation when derivatives are nested
        (AD of AD).
    derivatives : np.ndarray
        Read-only vector of partial derivatives d(value)/d(x_i), one entry per
        independent variable, in a fixed ordering shared by every Evaluation
        taking part in a computation.
    """

    __slots__ = ("value", "derivatives")

    def __init__(self, value: Any, derivatives: Iterable[Any]):
        if not isinstance(value, Evaluation):
            if not isinstance(value, (int, float, np.integer, np.floating)):
                raise TypeError(
                    f"Evaluation only accepts numeric or Evaluation values, "
                    f"but got {type(value)}"
                )
            value = np.float64(value)
        self.value = value
        self.derivatives = _pack_derivatives(derivatives)

    @property
    def num_vars(self) -> int:
        return len(self.derivatives)

    @classmethod
    def constant(cls, value, num_vars: int) -> "Evaluation":
        """
        Evaluation with all derivatives zero. An Evaluation `value` gives a
        nested result whose derivatives are zero constants of the inner type.
        """
        from .toolbox import evaluation_toolbox, toolbox_for
        return evaluation_toolbox(num_vars, toolbox_for(value)).create_constant(value)

    @classmethod
    def variable(cls, value, var_idx: int, num_vars: int) -> "Evaluation":
        """Evaluation seeded as independent variable `var_idx`."""
        from .toolbox import evaluation_toolbox, toolbox_for
        return evaluation_toolbox(num_vars, toolbox_for(value)).create_variable(value, var_idx)

    def __repr__(self):
        return f"Evaluation({self.value!r}, {list(self.derivatives)!r})"

    # Comparison: ordering looks at values only
    def __eq__(self, other):
        if isinstance(other, Evaluation):
            if self.num_vars != other.num_vars or self.value != other.value:
                return False
            return all(a == b for a, b in zip(self.derivatives, other.derivatives))
        if isinstance(other, (int, float, np.integer, np.floating)):
            return self.value == other
        return NotImplemented

    def __ne__(self, other):
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    __hash__ = None

    def __lt__(self, other):
        return self.value < _value_of(other)

    def __le__(self, other):
        return self.value <= _value_of(other)

    def __gt__(self, other):
        return self.value > _value_of(other)

    def __ge__(self, other):
        return self.value >= _value_of(other)

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pos__(self):
        return self

    def __abs__(self):
        from ..ops.special import abs
        return abs(self)

    def __pow__(self, other):
        from ..ops.transcendental import pow
        return pow(self, other)

    def __rpow__(self, other):
        from ..ops.transcendental import pow
        return pow(other, self)


def _value_of(x):
    return x.value if isinstance(x, Evaluation) else x
