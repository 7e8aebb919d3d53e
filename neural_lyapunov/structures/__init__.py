"""All neural Lyapunov structure classes.

FunctionNeuralLyapunovStructure - Structure built from user supplied V and V_dot functions.
NeuralLyapunovStructure - Base class for neural Lyapunov structures.
NonnegativeNeuralLyapunov - Structure of the form V(x) = phi(x)' phi(x) + delta * pos_def(x, x0).
UnstructuredNeuralLyapunov - Structure of the form V(x) = phi(x).
default_pos_def - Default positive definite offset, log(1 + ||x - x0||^2).
numerical_gradient - Finite difference gradient of a scalar function.
"""

from .function_neural_lyapunov_structure import FunctionNeuralLyapunovStructure
from .neural_lyapunov_structure import NeuralLyapunovStructure
from .nonnegative_neural_lyapunov import NonnegativeNeuralLyapunov
from .unstructured_neural_lyapunov import UnstructuredNeuralLyapunov
from .util import default_pos_def, numerical_gradient
