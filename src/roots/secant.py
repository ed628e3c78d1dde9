"""
Secant method for computing roots of scalar functions.
"""
import logging
from typing import Callable, Optional

import numpy as np

from roots.constants import TOL, MAX_ITERS, STALL_TOL
from roots.objective import Objective, check_options
from roots.exit_status import (
    RootResult,
    CONVERGED,
    STALL_DETECTED,
    MAX_ITERATIONS_EXCEEDED,
)

NAME = "secant"

# root-finders


def secant(
    f: Callable[[float], float],
    a: float,
    b: float,
    x0: float,
    tol: float = TOL,
    max_iters: int = MAX_ITERS,
    callback: Optional[Callable[[int, float], None]] = None,
    logger: Optional[logging.Logger] = None,
) -> RootResult:
    """Find a root of 'f' using a (guarded) secant method.
    The two trailing points are seeded with 'a' and 'x0'. [a, b] is a safety clamp, not a
    bracket: f(a) and f(b) need not differ in sign. Iterates which leave [a, b] are
    replaced by the midpoint of the interval; such guarded steps converge only on the
    residual test, and a guarded step which does not move fails with STALL_DETECTED.
    :param f: the function whose root should be found.
    :param a: lower bound on the solution; also the first trailing point.
    :param b: upper bound on the solution.
    :param x0: the second trailing point. Must differ from 'a' in function value.
    :param tol: (optional) tolerance on both the step length and |f(x)|.
    :param max_iters: (optional) the maximum number of iterations to run.
    :param callback: (optional) called as callback(itr, x) with every accepted iterate.
    :param logger: (optional) a logging instance to use.
    :returns: a RootResult. Fails with MAX_ITERATIONS_EXCEEDED if the cap is reached.
    """
    check_options(tol, max_iters)
    if not a < b:
        raise ValueError(f"The secant method requires a < b, got a={a}, b={b}!")
    if logger is None:
        logger = logging.getLogger(__name__)

    obj_fn = Objective(f)

    x_prev, x_curr = float(a), float(x0)
    f_prev = obj_fn(x_prev)
    f_curr = obj_fn(x_curr)

    for i in range(1, max_iters + 1):
        diff = f_curr - f_prev
        if np.abs(diff) < STALL_TOL:
            logger.info(f"Secant method stalled at x={x_curr} after {i - 1} iterations.")
            return RootResult(None, STALL_DETECTED, NAME, i - 1, obj_fn.n_evals)

        x_new = x_curr - f_curr * (x_curr - x_prev) / diff

        # guard the iterates
        guarded = not a <= x_new <= b
        if guarded:
            x_new = (a + b) / 2

            if x_new == x_curr:
                logger.info(
                    f"Secant method stalled at the midpoint x={x_curr} after {i - 1} iterations."
                )
                return RootResult(None, STALL_DETECTED, NAME, i - 1, obj_fn.n_evals)

        f_new = obj_fn(x_new)

        # guarded steps converge on the residual only.
        if np.abs(f_new) < tol or (not guarded and np.abs(x_new - x_curr) < tol):
            logger.debug(f"Secant method converged to {x_new} in {i} iterations.")
            return RootResult(x_new, CONVERGED, NAME, i, obj_fn.n_evals)

        x_prev, f_prev = x_curr, f_curr
        x_curr, f_curr = x_new, f_new

        if callback is not None:
            callback(i, x_curr)

    logger.info(f"Secant method reached the iteration cap ({max_iters}).")
    return RootResult(None, MAX_ITERATIONS_EXCEEDED, NAME, max_iters, obj_fn.n_evals)
