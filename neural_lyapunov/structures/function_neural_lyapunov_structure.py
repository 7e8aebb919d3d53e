"""Structure built from user supplied V and V_dot functions."""

import logging

from .neural_lyapunov_structure import NeuralLyapunovStructure

logger = logging.getLogger(__name__)

class FunctionNeuralLyapunovStructure(NeuralLyapunovStructure):
    """Structure built from user supplied V and V_dot functions.

    Both functions must be pure; they are shared read-only by every training
    iteration.

    Attributes:
    Lyapunov function, V_fn: (phi, x, x0) -> float
    Lyapunov function time derivative, V_dot_fn: (phi, J_phi, f, x, x0) -> float
    """

    def __init__(self, V, V_dot):
        """Initialize a FunctionNeuralLyapunovStructure object.

        Inputs:
        Lyapunov function, V: (phi, x, x0) -> float
        Lyapunov function time derivative, V_dot: (phi, J_phi, f, x, x0) -> float
        """

        if not callable(V):
            raise TypeError('V must be callable, got {}'.format(type(V).__name__))
        if not callable(V_dot):
            raise TypeError('V_dot must be callable, got {}'.format(type(V_dot).__name__))
        self._V = V
        self._V_dot = V_dot
        logger.debug('Built FunctionNeuralLyapunovStructure from %r and %r', V, V_dot)

    @property
    def V_fn(self):
        return self._V

    @property
    def V_dot_fn(self):
        return self._V_dot

    def V(self, phi, x, x0):
        return self._V(phi, x, x0)

    def V_dot(self, phi, J_phi, f, x, x0):
        return self._V_dot(phi, J_phi, f, x, x0)
