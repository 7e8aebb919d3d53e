"""Base class for neural Lyapunov structures."""

class NeuralLyapunovStructure:
    """Base class for neural Lyapunov structures.

    Override V, V_dot.

    A structure defines the Lyapunov function in terms of a neural network (or
    any other parameterized approximator) phi, so that some Lyapunov
    conditions can be enforced structurally rather than in training.

    Let n be the number of states, m be the approximator output size.
    """

    def V(self, phi, x, x0):
        """Evaluate the Lyapunov function at a state.

        Outputs a float.

        Inputs:
        Approximator, phi: numpy array (n,) -> numpy array (m,)
        State, x: numpy array (n,)
        Fixed point, x0: numpy array (n,)
        """

        raise NotImplementedError('V not implemented for NeuralLyapunovStructure of type {}'.format(type(self).__name__))

    def V_dot(self, phi, J_phi, f, x, x0):
        """Evaluate the Lyapunov function time derivative along the dynamics at a state.

        Outputs a float.

        Inputs:
        Approximator, phi: numpy array (n,) -> numpy array (m,)
        Approximator Jacobian, J_phi: numpy array (n,) -> numpy array (m, n)
        Dynamics, f: numpy array (n,) -> numpy array (n,)
        State, x: numpy array (n,)
        Fixed point, x0: numpy array (n,)
        """

        raise NotImplementedError('V_dot not implemented for NeuralLyapunovStructure of type {}'.format(type(self).__name__))
