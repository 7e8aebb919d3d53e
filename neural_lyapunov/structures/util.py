"""Utilities for neural Lyapunov structures"""

from numpy import absolute, asarray, dot, finfo, log1p, maximum, ravel, reshape, sqrt, subtract
from scipy.optimize import approx_fprime

EPSILON = sqrt(finfo(float).eps)

def default_pos_def(x, x0):
	"""Default positive definite offset, log(1 + ||x - x0||^2).

	Smooth, zero at the fixed point and strictly positive elsewhere.

	Outputs a float.

	Inputs:
	State, x: numpy array (n,)
	Fixed point, x0: numpy array (n,)
	"""

	e = subtract(x, x0)
	return log1p(dot(e, e))

def numerical_gradient(g, x, epsilon=EPSILON):
	"""Finite difference gradient of a scalar function.

	Default gradient provider for structures that need the state gradient of a
	function they do not own. The step along each coordinate is epsilon scaled
	by max(1, |x_i|), so accuracy does not degrade for large states. An
	automatic differentiation routine should be injected where one is
	available. The output has the shape of x.

	Outputs a numpy array (n,).

	Inputs:
	Scalar function, g: numpy array (n,) -> float
	State, x: numpy array (n,)
	Relative finite difference step, epsilon: float
	"""

	x = asarray(x, dtype=float)
	shape = x.shape
	xk = ravel(x)

	def _g(y):
		return g(reshape(y, shape))

	return reshape(approx_fprime(xk, _g, epsilon * maximum(1.0, absolute(xk))), shape)
