"""Minimization condition that skips the nonnegativity residual."""

from .minimization_condition import LyapunovMinimizationCondition

class DontCheckNonnegativity(LyapunovMinimizationCondition):
    """Minimization condition that skips the nonnegativity residual.

    Appropriate when nonnegativity has been enforced structurally. V(x0) = 0
    can still be checked, e.g. when V is structurally positive away from x0
    but V(x0) = 0 is not guaranteed.
    """

    def __init__(self, check_fixed_point=False):
        LyapunovMinimizationCondition.__init__(self, False, None, check_fixed_point)
