"""Base class for Lyapunov decrease conditions, and the general decrease condition."""

import logging
from functools import partial

from .no_check import NoCheck
from .util import check_callable

logger = logging.getLogger(__name__)

def _decrease_residual(decrease, strength, V, dVdt, x, x0):
    return decrease(V(x), dVdt(x)) - strength(x, x0)

class DecreaseCondition:
    """Base class for Lyapunov decrease conditions.

    Override get_condition.

    Attributes:
    Fixed point check flag, check_fixed_point: bool
    """

    def __init__(self, check_fixed_point):
        """Initialize a DecreaseCondition object.

        Inputs:
        Fixed point check flag, check_fixed_point: bool
        """

        self._check_fixed_point = bool(check_fixed_point)

    @property
    def check_fixed_point(self):
        return self._check_fixed_point

    def get_condition(self):
        """Residual function (V, dVdt, x, x0) -> float, nonpositive when the condition holds, or NoCheck."""

        raise NotImplementedError('get_condition not implemented for DecreaseCondition of type {}'.format(type(self).__name__))

class LyapunovDecreaseCondition(DecreaseCondition):
    """Decrease condition of the form decrease(V, dV/dt) <= strength(x, x0).

    If check_decrease is true, training will attempt to enforce
    decrease(V(x), dVdt(x)) <= strength(x, x0).

    If check_fixed_point is false, training assumes dVdt(x0) = 0; if true,
    training will enforce it. When the dynamics truly have a fixed point at x0
    and dVdt is derived from those dynamics, dVdt(x0) = 0 already, so the
    variants default check_fixed_point to false.

    Asymptotic decrease dV/dt < -C * ||x - x0||^2 corresponds to
    decrease = (V, dVdt) -> dVdt, strength = (x, x0) -> -C * ||x - x0||^2.
    Exponential decrease of rate k, dV/dt <= -k * V, corresponds to
    decrease = (V, dVdt) -> dVdt + k * V, strength = (x, x0) -> 0.

    Let n be the number of states.

    Attributes:
    Decrease check flag, check_decrease: bool
    Decrease expression, decrease: float * float -> float, or None
    Upper bound on decrease, strength: numpy array (n,) * numpy array (n,) -> float, or None
    Fixed point check flag, check_fixed_point: bool
    """

    def __init__(self, check_decrease, decrease, strength, check_fixed_point):
        """Initialize a LyapunovDecreaseCondition object.

        decrease and strength must both be given if check_decrease is true,
        and both be None otherwise.

        Inputs:
        Decrease check flag, check_decrease: bool
        Decrease expression, decrease: float * float -> float, or None
        Upper bound on decrease, strength: numpy array (n,) * numpy array (n,) -> float, or None
        Fixed point check flag, check_fixed_point: bool
        """

        check_callable('decrease', decrease)
        check_callable('strength', strength)
        if check_decrease and (decrease is None or strength is None):
            raise ValueError('decrease and strength are required when check_decrease is true')
        if not check_decrease and (decrease is not None or strength is not None):
            raise ValueError('decrease and strength must be None when check_decrease is false')

        DecreaseCondition.__init__(self, check_fixed_point)
        self._check_decrease = bool(check_decrease)
        self._decrease = decrease
        self._strength = strength
        logger.debug('Built %s with check_decrease=%s, check_fixed_point=%s', type(self).__name__, self._check_decrease, self._check_fixed_point)

    @property
    def check_decrease(self):
        return self._check_decrease

    @property
    def decrease(self):
        return self._decrease

    @property
    def strength(self):
        return self._strength

    def get_condition(self):
        if not self._check_decrease:
            return NoCheck

        return partial(_decrease_residual, self._decrease, self._strength)
