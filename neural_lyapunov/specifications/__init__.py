"""Specification classes grouping a structure with its conditions.

NeuralLyapunovSpecification - Structure, minimization condition and decrease condition for training.
"""

from .neural_lyapunov_specification import NeuralLyapunovSpecification
