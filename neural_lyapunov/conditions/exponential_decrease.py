"""Decrease condition dV/dt <= -k * V, or dV/dt <= -k * V - C * ||x - x0||^2 if strict."""

from functools import partial

from .decrease_condition import LyapunovDecreaseCondition
from .util import DEFAULT_C, check_coefficient, quadratic_strength, zero_strength

def _decrease(k, V, dVdt):
    return dVdt + k * V

class ExponentialDecrease(LyapunovDecreaseCondition):
    """Decrease condition dV/dt <= -k * V, or dV/dt <= -k * V - C * ||x - x0||^2 if strict.

    Proves exponential decrease of V at rate k.

    Attributes:
    Decay rate, k: float
    Strictness flag, strict: bool
    Margin coefficient, C: float
    """

    def __init__(self, k, strict=False, check_fixed_point=False, C=DEFAULT_C):
        """Initialize an ExponentialDecrease object.

        Inputs:
        Decay rate, k: float
        Strictness flag, strict: bool
        Fixed point check flag, check_fixed_point: bool
        Margin coefficient, used only if strict, C: float
        """

        check_coefficient(C)
        self._k = k
        self._strict = bool(strict)
        self._C = C

        strength = quadratic_strength(-C) if strict else zero_strength
        LyapunovDecreaseCondition.__init__(self, True, partial(_decrease, k), strength, check_fixed_point)

    @property
    def k(self):
        return self._k

    @property
    def strict(self):
        return self._strict

    @property
    def C(self):
        return self._C
