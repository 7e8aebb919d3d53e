"""Decrease condition that skips the decrease residual."""

from .decrease_condition import LyapunovDecreaseCondition

class DontCheckDecrease(LyapunovDecreaseCondition):
    """Decrease condition that skips the decrease residual.

    Appropriate when decrease along trajectories has been enforced
    structurally. dV/dt = 0 at the fixed point can still be checked.
    """

    def __init__(self, check_fixed_point=False):
        LyapunovDecreaseCondition.__init__(self, False, None, None, check_fixed_point)
