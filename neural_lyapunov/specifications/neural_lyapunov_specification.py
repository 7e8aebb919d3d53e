"""Structure, minimization condition and decrease condition for training."""

import logging

from ..conditions import DecreaseCondition, MinimizationCondition, get_condition
from ..structures import NeuralLyapunovStructure

logger = logging.getLogger(__name__)

class NeuralLyapunovSpecification:
    """Structure, minimization condition and decrease condition for training.

    Built once per training configuration and read concurrently by the
    training process; it is never modified after construction.

    Attributes:
    Lyapunov structure, structure: NeuralLyapunovStructure
    Minimization condition, minimization_condition: MinimizationCondition
    Decrease condition, decrease_condition: DecreaseCondition
    """

    def __init__(self, structure, minimization_condition, decrease_condition):
        """Initialize a NeuralLyapunovSpecification object.

        Inputs:
        Lyapunov structure, structure: NeuralLyapunovStructure
        Minimization condition, minimization_condition: MinimizationCondition
        Decrease condition, decrease_condition: DecreaseCondition
        """

        if not isinstance(structure, NeuralLyapunovStructure):
            raise TypeError('structure must be a NeuralLyapunovStructure, got {}'.format(type(structure).__name__))
        if not isinstance(minimization_condition, MinimizationCondition):
            raise TypeError('minimization_condition must be a MinimizationCondition, got {}'.format(type(minimization_condition).__name__))
        if not isinstance(decrease_condition, DecreaseCondition):
            raise TypeError('decrease_condition must be a DecreaseCondition, got {}'.format(type(decrease_condition).__name__))

        self._structure = structure
        self._minimization_condition = minimization_condition
        self._decrease_condition = decrease_condition
        logger.debug('Built NeuralLyapunovSpecification: %s, %s, %s', type(structure).__name__, type(minimization_condition).__name__, type(decrease_condition).__name__)

    @property
    def structure(self):
        return self._structure

    @property
    def minimization_condition(self):
        return self._minimization_condition

    @property
    def decrease_condition(self):
        return self._decrease_condition

    @property
    def check_fixed_point_value(self):
        """Whether training should enforce V(x0) = 0."""

        return self._minimization_condition.check_fixed_point

    @property
    def check_fixed_point_derivative(self):
        """Whether training should enforce dV/dt(x0) = 0."""

        return self._decrease_condition.check_fixed_point

    def minimization_residual(self):
        """Residual function (V, x, x0) -> float of the minimization condition, or NoCheck."""

        return get_condition(self._minimization_condition)

    def decrease_residual(self):
        """Residual function (V, dVdt, x, x0) -> float of the decrease condition, or NoCheck."""

        return get_condition(self._decrease_condition)
