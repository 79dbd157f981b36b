# densead/ops/__init__.py

# Chain-rule implementations for Evaluation operands. Generic code that must
# also accept plain numbers should go through densead.core.toolbox instead.
from . import arithmetic
from . import special
from . import trigonometric
from . import transcendental

# Flat namespace: every AD primitive importable from densead.ops
from .arithmetic import add, sub, mul, div, neg
from .special import abs, min, max, erf
from .trigonometric import sin, cos, tan, asin, acos, atan, atan2
from .transcendental import exp, log, sqrt, pow

__all__ = [
    "add", "sub", "mul", "div", "neg",
    "abs", "min", "max", "erf",
    "sin", "cos", "tan", "asin", "acos", "atan", "atan2",
    "exp", "log", "sqrt", "pow",
]
