"""
Default numerical constants shared by the root-finders.
"""

# absolute tolerance on the residual and/or the step size.
TOL = 1e-6

# hard cap on the number of iterations.
MAX_ITERS = 1000000

# denominators smaller than this in magnitude are treated as zero.
STALL_TOL = 1e-12
