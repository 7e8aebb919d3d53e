"""Condition dispatcher."""

from .decrease_condition import DecreaseCondition
from .minimization_condition import MinimizationCondition

def get_condition(cond):
    """Residual function for a condition, or NoCheck.

    Minimization conditions give a residual (V, x, x0) -> float that is
    nonnegative when the condition holds. Decrease conditions give a residual
    (V, dVdt, x, x0) -> float that is nonpositive when the condition holds.
    NoCheck means the residual should be left out of the loss.

    Outputs a function or NoCheck.

    Inputs:
    Condition, cond: MinimizationCondition or DecreaseCondition
    """

    if not isinstance(cond, (MinimizationCondition, DecreaseCondition)):
        raise TypeError('get_condition expects a MinimizationCondition or DecreaseCondition, got {}'.format(type(cond).__name__))
    return cond.get_condition()
