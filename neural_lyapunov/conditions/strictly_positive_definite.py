"""Minimization condition V(x) >= C * ||x - x0||^2."""

from .minimization_condition import LyapunovMinimizationCondition
from .util import DEFAULT_C, check_coefficient, quadratic_strength

class StrictlyPositiveDefinite(LyapunovMinimizationCondition):
    """Minimization condition V(x) >= C * ||x - x0||^2.

    If check_fixed_point is true, training will also attempt to enforce
    V(x0) = 0.

    Attributes:
    Coefficient, C: float
    """

    def __init__(self, C=DEFAULT_C, check_fixed_point=True):
        """Initialize a StrictlyPositiveDefinite object.

        Inputs:
        Coefficient, C: float
        Fixed point check flag, check_fixed_point: bool
        """

        check_coefficient(C)
        self._C = C
        LyapunovMinimizationCondition.__init__(self, True, quadratic_strength(C), check_fixed_point)

    @property
    def C(self):
        return self._C
