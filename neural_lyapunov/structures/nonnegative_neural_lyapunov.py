"""Structure of the form V(x) = phi(x)' phi(x) + delta * pos_def(x, x0)."""

import logging

from numpy import dot

from .neural_lyapunov_structure import NeuralLyapunovStructure
from .util import default_pos_def, numerical_gradient

logger = logging.getLogger(__name__)

class NonnegativeNeuralLyapunov(NeuralLyapunovStructure):
    """Structure of the form V(x) = phi(x)' phi(x) + delta * pos_def(x, x0).

    This structure ensures V(x) >= 0. If delta > 0, pos_def(x0, x0) = 0 and
    pos_def(x, x0) > 0 for x != x0, it also ensures V(x) > 0 for x != x0. It
    does not ensure V(x0) = 0, so that must be checked by the minimization
    condition.

    Let n be the number of states, m be the approximator output size.

    Attributes:
    Offset weight, delta: float
    Positive definite offset, pos_def: numpy array (n,) * numpy array (n,) -> float
    Gradient provider, gradient: (numpy array (n,) -> float) * numpy array (n,) -> numpy array (n,)
    """

    def __init__(self, delta=0.0, pos_def=None, gradient=None):
        """Initialize a NonnegativeNeuralLyapunov object.

        The gradient provider is only used when delta > 0, to differentiate
        pos_def with respect to the state. Defaults to a finite difference
        gradient; pass an automatic differentiation routine where available.

        Inputs:
        Offset weight, delta: float
        Positive definite offset, pos_def: numpy array (n,) * numpy array (n,) -> float
        Gradient provider, gradient: (numpy array (n,) -> float) * numpy array (n,) -> numpy array (n,)
        """

        if not delta >= 0:
            raise ValueError('delta must be nonnegative, got {}'.format(delta))
        if pos_def is None:
            pos_def = default_pos_def
        if gradient is None:
            gradient = numerical_gradient
        if not callable(pos_def):
            raise TypeError('pos_def must be callable, got {}'.format(type(pos_def).__name__))
        if not callable(gradient):
            raise TypeError('gradient must be callable, got {}'.format(type(gradient).__name__))

        self._delta = delta
        self._pos_def = pos_def
        self._gradient = gradient
        logger.debug('Built NonnegativeNeuralLyapunov with delta=%s', delta)

    @property
    def delta(self):
        return self._delta

    @property
    def pos_def(self):
        return self._pos_def

    @property
    def gradient(self):
        return self._gradient

    def V(self, phi, x, x0):
        phi_x = phi(x)
        if self._delta == 0:
            return dot(phi_x, phi_x)
        return dot(phi_x, phi_x) + self._delta * self._pos_def(x, x0)

    def V_dot(self, phi, J_phi, f, x, x0):
        """Evaluate the Lyapunov function time derivative along the dynamics at a state.

        V_dot is 2 * phi(x)' J_phi(x) f(x), plus delta * grad pos_def(x, x0) f(x)
        when delta > 0.

        Outputs a float.

        Inputs:
        Approximator, phi: numpy array (n,) -> numpy array (m,)
        Approximator Jacobian, J_phi: numpy array (n,) -> numpy array (m, n)
        Dynamics, f: numpy array (n,) -> numpy array (n,)
        State, x: numpy array (n,)
        Fixed point, x0: numpy array (n,)
        """

        f_x = f(x)
        V_dot = 2 * dot(phi(x), dot(J_phi(x), f_x))
        if self._delta == 0:
            return V_dot

        grad_pos_def = self._gradient(lambda y: self._pos_def(y, x0), x)
        return V_dot + self._delta * dot(grad_pos_def, f_x)
