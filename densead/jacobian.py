# densead/jacobian.py

#-----------------------------------------------------------------------------
# Seed every input as its own independent variable, run the function once,
# and read the whole Jacobian off the derivative vectors of the outputs.
#-----------------------------------------------------------------------------
from __future__ import annotations
import warnings
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .config import ADConfig
from .core.evaluation import Evaluation
from .core.toolbox import evaluation_toolbox, scalar_value


def seed_variables(values: Iterable[float]) -> List[Evaluation]:
    """
    Wrap plain values as Evaluations, variable i seeded at derivative index i.

    Example
    -------
    x, y = seed_variables([2.0, 3.0])
    x.derivatives -> [1., 0.],  y.derivatives -> [0., 1.]
    """
    values = list(values)
    tb = evaluation_toolbox(len(values))
    return [tb.create_variable(v, i) for i, v in enumerate(values)]


def _as_outputs(y: Any) -> List[Any]:
    if isinstance(y, (list, tuple)):
        return list(y)
    if isinstance(y, np.ndarray):
        return list(y.ravel())
    return [y]


def jacobian(f: Callable[[List[Evaluation]], Any],
             x0: Union[float, Sequence[float], np.ndarray]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Values and Jacobian of f at x0 in a single forward pass.

    Args:
        f:  callable taking a list of Evaluations and returning an Evaluation,
            a plain number (treated as constant) or a sequence of them.
        x0: input point (scalar or 1-D).

    Returns:
        (values, J): values has shape (n_out,), J has shape (n_out, n_in).
    """
    x0 = np.atleast_1d(np.asarray(x0, dtype=float)).ravel()
    xs = seed_variables(x0)
    outputs = _as_outputs(f(xs))

    n_in = len(xs)
    values = np.zeros(len(outputs))
    J = np.zeros((len(outputs), n_in))
    for k, out in enumerate(outputs):
        if isinstance(out, Evaluation):
            if out.num_vars != n_in:
                raise ValueError(
                    f"output {k} carries {out.num_vars} derivatives, expected {n_in}"
                )
            values[k] = scalar_value(out)
            J[k, :] = [scalar_value(d) for d in out.derivatives]
        else:
            values[k] = out
    return values, J


def grad(f: Callable[[Dict[str, Evaluation]], Any],
         inputs: Dict[str, float]) -> Dict[str, float]:
    """
    Gradient of a scalar-output function y=f(vars) w.r.t. ALL inputs (dict form).

    Parameters
    ----------
    f       : function taking a dict {name: Evaluation} and returning a scalar Evaluation
    inputs  : dict {name: numeric}

    Returns
    -------
    dict {name: float}  # partials in the same key order as `inputs`
    """
    keys = list(inputs.keys())
    xs = seed_variables([inputs[k] for k in keys])
    y = f(dict(zip(keys, xs)))
    if isinstance(y, (list, tuple, np.ndarray)):
        raise ValueError("grad(f, inputs) expects scalar output.")
    if not isinstance(y, Evaluation):
        return {k: 0.0 for k in keys}
    return {k: float(scalar_value(y.derivatives[i])) for i, k in enumerate(keys)}


def fd_jacobian(f: Callable[[List[float]], Any],
                x0: Union[float, Sequence[float], np.ndarray],
                eps: Optional[float] = None) -> np.ndarray:
    """
    Central-difference Jacobian, bumping one coordinate at a time:

        J[:, j] = [f(x + h e_j) - f(x - h e_j)] / (2h)

    f receives plain floats, so it must be written against the generic
    toolbox functions to be usable with both this and `jacobian`.
    Step h defaults to ADConfig.fd_step(x_j).
    """
    x0 = np.atleast_1d(np.asarray(x0, dtype=float)).ravel()

    def _eval(x):
        return np.asarray(_as_outputs(f([float(v) for v in x])), dtype=float)

    f0 = _eval(x0)
    J = np.zeros((f0.size, x0.size))
    for j in range(x0.size):
        h = eps if eps is not None else ADConfig.fd_step(x0[j])
        xp = x0.copy(); xp[j] += h
        xm = x0.copy(); xm[j] -= h
        J[:, j] = (_eval(xp) - _eval(xm)) / (2.0 * h)
    return J


def check_derivatives(f: Callable[[List[Any]], Any],
                      x0: Union[float, Sequence[float], np.ndarray],
                      *, rtol: Optional[float] = None, atol: Optional[float] = None,
                      eps: Optional[float] = None) -> List[Dict[str, Any]]:
    """
    Compare the forward-mode Jacobian of f against central differences.

    Returns the disagreeing entries as a list of dicts sorted by |diff|:
        {"i": output index, "j": input index, "ad": float, "fd": float, "diff": float}
    and warns (RuntimeWarning) when the list is not empty.
    """
    rtol = ADConfig.CHECK_RTOL if rtol is None else rtol
    atol = ADConfig.CHECK_ATOL if atol is None else atol

    _, J_ad = jacobian(f, x0)
    J_fd = fd_jacobian(f, x0, eps=eps)

    mismatches = []
    n_out, n_in = J_ad.shape
    for i in range(n_out):
        for j in range(n_in):
            d = float(J_ad[i, j] - J_fd[i, j])
            if not abs(d) <= atol + rtol * abs(J_fd[i, j]):
                mismatches.append({"i": i, "j": j, "ad": float(J_ad[i, j]),
                                   "fd": float(J_fd[i, j]), "diff": d})
    mismatches.sort(key=lambda m: abs(m["diff"]), reverse=True)

    if mismatches:
        worst = mismatches[0]
        warnings.warn(
            f"{len(mismatches)} Jacobian entries disagree with finite differences; "
            f"worst at (i={worst['i']}, j={worst['j']}): "
            f"ad={worst['ad']:.6e}, fd={worst['fd']:.6e}",
            RuntimeWarning,
        )
    return mismatches
