"""Utilities for Lyapunov conditions"""

from functools import partial

from numpy import dot, subtract

DEFAULT_C = 1e-6

def squared_distance(x, x0):
	"""Compute ||x - x0||^2.

	Outputs a float.

	Inputs:
	State, x: numpy array (n,)
	Fixed point, x0: numpy array (n,)
	"""

	e = subtract(x, x0)
	return dot(e, e)

def _scaled_squared_distance(C, x, x0):
	return C * squared_distance(x, x0)

def zero_strength(x, x0):
	"""Strength of a non-strict condition, identically 0."""

	return 0.0

def quadratic_strength(C):
	"""Create the strength function (x, x0) -> C * ||x - x0||^2.

	Outputs a numpy array (n,) * numpy array (n,) -> float.

	Inputs:
	Coefficient, C: float
	"""

	return partial(_scaled_squared_distance, C)

def check_coefficient(C):
	"""Raise ValueError if a margin coefficient is negative or NaN."""

	if not C >= 0:
		raise ValueError('C must be nonnegative, got {}'.format(C))

def check_callable(name, fn):
	"""Raise TypeError if fn is neither None nor callable."""

	if fn is not None and not callable(fn):
		raise TypeError('{} must be callable, got {}'.format(name, type(fn).__name__))
