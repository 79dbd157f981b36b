# densead/core/__init__.py

"""
Core public API for densead.

Exports:
    Evaluation         : value + dense derivative vector (forward-mode AD value).
    ScalarToolbox      : math interface for plain floating point numbers.
    EvaluationToolbox  : math interface for Evaluations (possibly nested).
    SCALAR_TOOLBOX     : the shared ScalarToolbox instance.
    toolbox_for        : resolve the toolbox matching a value.
    evaluation_toolbox : build (cached) toolbox for num_vars derivatives.
"""

from .evaluation import Evaluation
from .toolbox import (
    ScalarToolbox,
    EvaluationToolbox,
    SCALAR_TOOLBOX,
    toolbox_for,
    evaluation_toolbox,
)

__all__ = [
    "Evaluation",
    "ScalarToolbox", "EvaluationToolbox", "SCALAR_TOOLBOX",
    "toolbox_for", "evaluation_toolbox",
]
