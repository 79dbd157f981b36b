# densead/__init__.py
# Dense forward-mode automatic differentiation

from .config import ADConfig
from .core.evaluation import Evaluation
from .core.toolbox import (
    ScalarToolbox,
    EvaluationToolbox,
    SCALAR_TOOLBOX,
    toolbox_for,
    evaluation_toolbox,
)

# Generic math: works on plain numbers and on (nested) Evaluations alike
from .core.toolbox import (
    value,
    scalar_value,
    create_constant,
    create_variable,
    decay,
    is_same,
    abs, min, max,
    sin, cos, tan, asin, acos, atan, atan2,
    exp, log, sqrt, pow, erf,
)

# Chain-rule implementations (Evaluation operands only)
from . import ops

# Seeding / Jacobian helpers
from .jacobian import seed_variables, jacobian, grad, fd_jacobian, check_derivatives

__all__ = [
    # Core
    'ADConfig',
    'Evaluation',
    'ScalarToolbox',
    'EvaluationToolbox',
    'SCALAR_TOOLBOX',
    'toolbox_for',
    'evaluation_toolbox',
    # Generic math
    'value', 'scalar_value', 'create_constant', 'create_variable',
    'decay', 'is_same',
    'abs', 'min', 'max',
    'sin', 'cos', 'tan', 'asin', 'acos', 'atan', 'atan2',
    'exp', 'log', 'sqrt', 'pow', 'erf',
    'ops',
    # Jacobians
    'seed_variables',
    'jacobian',
    'grad',
    'fd_jacobian',
    'check_derivatives',
]
