"""Base class for Lyapunov minimization conditions, and the general minimization condition."""

import logging
from functools import partial

from .no_check import NoCheck
from .util import check_callable

logger = logging.getLogger(__name__)

def _minimization_residual(strength, V, x, x0):
    return V(x) - strength(x, x0)

class MinimizationCondition:
    """Base class for Lyapunov minimization conditions.

    Override get_condition.

    Attributes:
    Fixed point check flag, check_fixed_point: bool
    """

    def __init__(self, check_fixed_point):
        """Initialize a MinimizationCondition object.

        Inputs:
        Fixed point check flag, check_fixed_point: bool
        """

        self._check_fixed_point = bool(check_fixed_point)

    @property
    def check_fixed_point(self):
        return self._check_fixed_point

    def get_condition(self):
        """Residual function (V, x, x0) -> float, nonnegative when the condition holds, or NoCheck."""

        raise NotImplementedError('get_condition not implemented for MinimizationCondition of type {}'.format(type(self).__name__))

class LyapunovMinimizationCondition(MinimizationCondition):
    """Minimization condition of the form V(x) >= strength(x, x0).

    If check_nonnegativity is true, training will attempt to enforce
    V(x) >= strength(x, x0). If check_fixed_point is true, training will also
    attempt to enforce V(x0) = 0.

    Requiring V(x) >= ||x - x0||^2 together with V(x0) = 0 makes V uniquely
    minimized at x0. If V is structurally nonnegative, only V(x0) = 0 needs to
    be enforced, so check_nonnegativity = False, check_fixed_point = True.

    Let n be the number of states.

    Attributes:
    Nonnegativity check flag, check_nonnegativity: bool
    Lower bound on V, strength: numpy array (n,) * numpy array (n,) -> float, or None
    Fixed point check flag, check_fixed_point: bool
    """

    def __init__(self, check_nonnegativity, strength, check_fixed_point):
        """Initialize a LyapunovMinimizationCondition object.

        strength must be given if and only if check_nonnegativity is true.

        Inputs:
        Nonnegativity check flag, check_nonnegativity: bool
        Lower bound on V, strength: numpy array (n,) * numpy array (n,) -> float, or None
        Fixed point check flag, check_fixed_point: bool
        """

        check_callable('strength', strength)
        if check_nonnegativity and strength is None:
            raise ValueError('strength is required when check_nonnegativity is true')
        if not check_nonnegativity and strength is not None:
            raise ValueError('strength must be None when check_nonnegativity is false')

        MinimizationCondition.__init__(self, check_fixed_point)
        self._check_nonnegativity = bool(check_nonnegativity)
        self._strength = strength
        logger.debug('Built %s with check_nonnegativity=%s, check_fixed_point=%s', type(self).__name__, self._check_nonnegativity, self._check_fixed_point)

    @property
    def check_nonnegativity(self):
        return self._check_nonnegativity

    @property
    def strength(self):
        return self._strength

    def get_condition(self):
        if not self._check_nonnegativity:
            return NoCheck

        return partial(_minimization_residual, self._strength)
