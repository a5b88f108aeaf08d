"""Default constants consumed by the iterative routines."""

# Maximum number of iterations for numerical methods
MAX_ITER = 1000

# Convergence tolerance, expressed as the relative change in every element
# below which an iteration is considered converged.
CONV_TOL = 1e-12
