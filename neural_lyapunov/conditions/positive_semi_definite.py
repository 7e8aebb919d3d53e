"""Minimization condition V(x) >= 0."""

from .minimization_condition import LyapunovMinimizationCondition
from .util import zero_strength

class PositiveSemiDefinite(LyapunovMinimizationCondition):
    """Minimization condition V(x) >= 0.

    If check_fixed_point is true, training will also attempt to enforce
    V(x0) = 0.
    """

    def __init__(self, check_fixed_point=True):
        LyapunovMinimizationCondition.__init__(self, True, zero_strength, check_fixed_point)
