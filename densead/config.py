"""
Numeric Configuration

Shared defaults for tolerances and finite-difference steps used across the
package. Values are class attributes so callers can read them directly or
override them per call.
"""

from typing import Optional


class ADConfig:
    """Shared numeric defaults for densead"""

    # is_same() default: absolute tolerance per component
    DEFAULT_TOLERANCE = 1e-10

    # Finite differences: step = FD_REL_STEP * max(1, |x|)
    FD_REL_STEP = 1e-6

    # check_derivatives(): |ad - fd| <= CHECK_ATOL + CHECK_RTOL * |fd|
    CHECK_RTOL = 1e-5
    CHECK_ATOL = 1e-7

    @staticmethod
    def fd_step(x: float, rel_step: Optional[float] = None) -> float:
        """
        Central-difference step for coordinate value x.

        Scales with |x| so large coordinates are bumped proportionally, and
        falls back to an absolute step near zero.

        Example:
            x=0.0    -> 1e-6
            x=250.0  -> 2.5e-4
        """
        rel = ADConfig.FD_REL_STEP if rel_step is None else rel_step
        return rel * max(1.0, abs(float(x)))
