"""
Newton's method for computing roots of scalar functions.
"""
import logging
from typing import Callable, Optional

import numpy as np

from roots.constants import TOL, MAX_ITERS, STALL_TOL
from roots.objective import Objective, check_options
from roots.exit_status import (
    RootResult,
    CONVERGED,
    ZERO_DERIVATIVE,
    OUT_OF_BOUNDS,
    MAX_ITERATIONS_EXCEEDED,
)

NAME = "newton"

# root-finders


def newton(
    f: Callable[[float], float],
    g: Callable[[float], float],
    a: float,
    b: float,
    x0: float,
    tol: float = TOL,
    max_iters: int = MAX_ITERS,
    callback: Optional[Callable[[int, float], None]] = None,
    logger: Optional[logging.Logger] = None,
) -> RootResult:
    """Find a root of 'f' using Newton-Raphson steps from the initial guess 'x0'.
    The method is not guarded: an iterate outside of [a, b] terminates the search with
    status OUT_OF_BOUNDS rather than being projected back into the interval.
    :param f: the function whose root should be found.
    :param g: the derivative of 'f'.
    :param a: lower bound on admissible iterates.
    :param b: upper bound on admissible iterates.
    :param x0: the initial guess. It need not satisfy any sign condition.
    :param tol: (optional) tolerance on the step length.
    :param max_iters: (optional) the maximum number of iterations to run.
    :param callback: (optional) called as callback(itr, x) with every accepted iterate.
    :param logger: (optional) a logging instance to use.
    :returns: a RootResult. n_evals counts evaluations of both 'f' and 'g'.
    """
    check_options(tol, max_iters)
    if not a < b:
        raise ValueError(f"Newton's method requires a < b, got a={a}, b={b}!")
    if logger is None:
        logger = logging.getLogger(__name__)

    obj_fn = Objective(f)
    grad_fn = Objective(g)

    def n_evals():
        return obj_fn.n_evals + grad_fn.n_evals

    x = float(x0)
    for i in range(1, max_iters + 1):
        f_x = obj_fn(x)
        g_x = grad_fn(x)

        if np.abs(g_x) < STALL_TOL:
            logger.info(f"Newton's method: derivative vanished at x={x}.")
            return RootResult(None, ZERO_DERIVATIVE, NAME, i - 1, n_evals())

        x_next = x - f_x / g_x

        if not a <= x_next <= b:
            logger.info(f"Newton's method: iterate {x_next} left [{a}, {b}].")
            return RootResult(None, OUT_OF_BOUNDS, NAME, i, n_evals())

        if np.abs(x_next - x) < tol:
            logger.debug(f"Newton's method converged to {x_next} in {i} iterations.")
            return RootResult(x_next, CONVERGED, NAME, i, n_evals())

        x = x_next

        if callback is not None:
            callback(i, x)

    logger.info(f"Newton's method reached the iteration cap ({max_iters}).")
    return RootResult(None, MAX_ITERATIONS_EXCEEDED, NAME, max_iters, n_evals())
