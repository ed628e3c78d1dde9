"""
`roots`: classical root-finding methods for scalar functions.

Every method returns a `RootResult`. Numerical failures are reported through
`RootResult.status`; call `RootResult.unwrap()` to raise them instead.
"""

from roots.constants import TOL, MAX_ITERS, STALL_TOL
from roots.exit_status import (
    RootResult,
    RootFindingError,
    NoSignChangeError,
    StallDetectedError,
    ZeroDerivativeError,
    OutOfBoundsError,
    MaxIterationsExceededError,
    CONVERGED,
    BEST_EFFORT,
    NO_SIGN_CHANGE,
    STALL_DETECTED,
    ZERO_DERIVATIVE,
    OUT_OF_BOUNDS,
    MAX_ITERATIONS_EXCEEDED,
)
from roots.bisection import bisection
from roots.regula_falsi import regula_falsi
from roots.newton import newton
from roots.secant import secant
from roots.solvers import METHODS, get_solver, find_root
from roots.logs import get_logger

__all__ = [
    "TOL",
    "MAX_ITERS",
    "STALL_TOL",
    "RootResult",
    "RootFindingError",
    "NoSignChangeError",
    "StallDetectedError",
    "ZeroDerivativeError",
    "OutOfBoundsError",
    "MaxIterationsExceededError",
    "CONVERGED",
    "BEST_EFFORT",
    "NO_SIGN_CHANGE",
    "STALL_DETECTED",
    "ZERO_DERIVATIVE",
    "OUT_OF_BOUNDS",
    "MAX_ITERATIONS_EXCEEDED",
    "bisection",
    "regula_falsi",
    "newton",
    "secant",
    "METHODS",
    "get_solver",
    "find_root",
    "get_logger",
]
