"""
Regula falsi (false position) method for computing roots of scalar functions.
"""
import logging
from typing import Callable, Optional

import numpy as np

from roots.constants import TOL, MAX_ITERS, STALL_TOL
from roots.objective import Objective, check_options
from roots.exit_status import (
    RootResult,
    CONVERGED,
    NO_SIGN_CHANGE,
    STALL_DETECTED,
    MAX_ITERATIONS_EXCEEDED,
)

NAME = "regula_falsi"

# root-finders


def regula_falsi(
    f: Callable[[float], float],
    a: float,
    b: float,
    tol: float = TOL,
    max_iters: int = MAX_ITERS,
    callback: Optional[Callable[[int, float, float], None]] = None,
    logger: Optional[logging.Logger] = None,
) -> RootResult:
    """Find a root of 'f' inside the bracket [a, b] using the method of false position.
    Each step intersects the chord through (a, f(a)) and (b, f(b)) with the x-axis. Steps
    which do not land strictly inside the bracket are replaced with the midpoint, so the
    method never does worse than bisection.
    :param f: the function whose root should be found.
    :param a: one endpoint of the bracket.
    :param b: the other endpoint of the bracket. The endpoints may be given in either order.
    :param tol: (optional) tolerance on both |f(c)| and the width of the bracket.
    :param max_iters: (optional) the maximum number of iterations to run.
    :param callback: (optional) called as callback(itr, a, b) after every bracket update.
    :param logger: (optional) a logging instance to use.
    :returns: a RootResult. Fails with MAX_ITERATIONS_EXCEEDED if the cap is reached.
    """
    check_options(tol, max_iters)
    if logger is None:
        logger = logging.getLogger(__name__)

    obj_fn = Objective(f)

    a, b = float(a), float(b)
    if a > b:
        a, b = b, a

    f_a = obj_fn(a)
    f_b = obj_fn(b)

    # NaN endpoint values fail the check.
    if not np.sign(f_a) * np.sign(f_b) <= 0:
        logger.info(f"Regula falsi: no sign change on [{a}, {b}].")
        return RootResult(None, NO_SIGN_CHANGE, NAME, 0, obj_fn.n_evals)

    if f_a == 0:
        return RootResult(a, CONVERGED, NAME, 0, obj_fn.n_evals)
    if f_b == 0:
        return RootResult(b, CONVERGED, NAME, 0, obj_fn.n_evals)

    for i in range(1, max_iters + 1):
        diff = f_b - f_a
        if np.abs(diff) < STALL_TOL:
            logger.info(f"Regula falsi stalled on [{a}, {b}] after {i - 1} iterations.")
            return RootResult(None, STALL_DETECTED, NAME, i - 1, obj_fn.n_evals)

        c = a - f_a * (b - a) / diff

        # the interpolant can overshoot for strongly convex/concave functions.
        if not a < c < b:
            c = (a + b) / 2

        f_c = obj_fn(c)

        if np.abs(f_c) < tol or np.abs(b - a) < tol:
            logger.debug(f"Regula falsi converged to {c} in {i} iterations.")
            return RootResult(c, CONVERGED, NAME, i, obj_fn.n_evals)

        if np.sign(f_a) != np.sign(f_c):
            b, f_b = c, f_c
        else:
            a, f_a = c, f_c

        if callback is not None:
            callback(i, a, b)

    logger.info(f"Regula falsi reached the iteration cap ({max_iters}).")
    return RootResult(None, MAX_ITERATIONS_EXCEEDED, NAME, max_iters, obj_fn.n_evals)
