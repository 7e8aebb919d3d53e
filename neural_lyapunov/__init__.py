"""Python library for specifying neural Lyapunov function training conditions.

conditions - Minimization and decrease condition classes, and the condition dispatcher.
specifications - Specification classes grouping a structure with its conditions.
structures - All neural Lyapunov structure classes.
"""

name = 'neural_lyapunov'
