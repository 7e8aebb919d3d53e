"""Minimization and decrease condition classes, and the condition dispatcher.

AsymptoticDecrease - Decrease condition dV/dt <= 0, or dV/dt <= -C * ||x - x0||^2 if strict.
DecreaseCondition - Base class for Lyapunov decrease conditions.
DontCheckDecrease - Decrease condition that skips the decrease residual.
DontCheckNonnegativity - Minimization condition that skips the nonnegativity residual.
ExponentialDecrease - Decrease condition dV/dt <= -k * V, or dV/dt <= -k * V - C * ||x - x0||^2 if strict.
LyapunovDecreaseCondition - Decrease condition of the form decrease(V, dV/dt) <= strength(x, x0).
LyapunovMinimizationCondition - Minimization condition of the form V(x) >= strength(x, x0).
MinimizationCondition - Base class for Lyapunov minimization conditions.
NoCheck - Marker returned by get_condition when a residual should be omitted.
PositiveSemiDefinite - Minimization condition V(x) >= 0.
StrictlyPositiveDefinite - Minimization condition V(x) >= C * ||x - x0||^2.
get_condition - Residual function for a condition, or NoCheck.
"""

from .asymptotic_decrease import AsymptoticDecrease
from .decrease_condition import DecreaseCondition, LyapunovDecreaseCondition
from .dont_check_decrease import DontCheckDecrease
from .dont_check_nonnegativity import DontCheckNonnegativity
from .exponential_decrease import ExponentialDecrease
from .minimization_condition import LyapunovMinimizationCondition, MinimizationCondition
from .no_check import NoCheck
from .positive_semi_definite import PositiveSemiDefinite
from .strictly_positive_definite import StrictlyPositiveDefinite
from .dispatcher import get_condition
