"""Structure of the form V(x) = phi(x)."""

from numpy import dot

from .neural_lyapunov_structure import NeuralLyapunovStructure

class UnstructuredNeuralLyapunov(NeuralLyapunovStructure):
    """Structure of the form V(x) = phi(x).

    The approximator must be scalar valued, and J_phi is its gradient. No
    Lyapunov condition is enforced structurally, so positivity and the zero at
    the fixed point must both be enforced by conditions.
    """

    def V(self, phi, x, x0):
        return phi(x)

    def V_dot(self, phi, J_phi, f, x, x0):
        return dot(J_phi(x), f(x))
