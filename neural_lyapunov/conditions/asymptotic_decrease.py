"""Decrease condition dV/dt <= 0, or dV/dt <= -C * ||x - x0||^2 if strict."""

from .decrease_condition import LyapunovDecreaseCondition
from .util import DEFAULT_C, check_coefficient, quadratic_strength, zero_strength

def _decrease(V, dVdt):
    return dVdt

class AsymptoticDecrease(LyapunovDecreaseCondition):
    """Decrease condition dV/dt <= 0, or dV/dt <= -C * ||x - x0||^2 if strict.

    Attributes:
    Strictness flag, strict: bool
    Margin coefficient, C: float
    """

    def __init__(self, strict=False, check_fixed_point=False, C=DEFAULT_C):
        """Initialize an AsymptoticDecrease object.

        Inputs:
        Strictness flag, strict: bool
        Fixed point check flag, check_fixed_point: bool
        Margin coefficient, used only if strict, C: float
        """

        check_coefficient(C)
        self._strict = bool(strict)
        self._C = C
        strength = quadratic_strength(-C) if strict else zero_strength
        LyapunovDecreaseCondition.__init__(self, True, _decrease, strength, check_fixed_point)

    @property
    def strict(self):
        return self._strict

    @property
    def C(self):
        return self._C
