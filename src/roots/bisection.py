"""
Bisection method for computing roots of scalar functions.
"""
import logging
from typing import Callable, Optional

import numpy as np

from roots.constants import TOL, MAX_ITERS
from roots.objective import Objective, check_options
from roots.exit_status import (
    RootResult,
    CONVERGED,
    BEST_EFFORT,
    NO_SIGN_CHANGE,
)

NAME = "bisection"

# root-finders


def bisection(
    f: Callable[[float], float],
    a: float,
    b: float,
    tol: float = TOL,
    max_iters: int = MAX_ITERS,
    callback: Optional[Callable[[int, float, float], None]] = None,
    logger: Optional[logging.Logger] = None,
) -> RootResult:
    """Find a root of 'f' inside the bracket [a, b] by repeatedly halving the bracket.
    The bracket must contain a sign change, ie. f(a) * f(b) <= 0. If the iteration cap is
    reached before the tolerance is met, the last midpoint is returned with status BEST_EFFORT;
    the bracket still guarantees it lies close to a root.
    :param f: the function whose root should be found.
    :param a: one endpoint of the bracket.
    :param b: the other endpoint of the bracket. The endpoints may be given in either order.
    :param tol: (optional) tolerance on both |f(c)| and the width of the bracket.
    :param max_iters: (optional) the maximum number of iterations to run.
    :param callback: (optional) called as callback(itr, a, b) after every bracket update.
    :param logger: (optional) a logging instance to use.
    :returns: a RootResult.
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
        logger.info(f"Bisection: no sign change on [{a}, {b}].")
        return RootResult(None, NO_SIGN_CHANGE, NAME, 0, obj_fn.n_evals)

    # one of the endpoints is already a root.
    if f_a == 0:
        return RootResult(a, CONVERGED, NAME, 0, obj_fn.n_evals)
    if f_b == 0:
        return RootResult(b, CONVERGED, NAME, 0, obj_fn.n_evals)

    c = a
    for i in range(1, max_iters + 1):
        c = (a + b) / 2
        f_c = obj_fn(c)

        if np.abs(f_c) < tol or np.abs(b - a) < tol:
            logger.debug(f"Bisection converged to {c} in {i} iterations.")
            return RootResult(c, CONVERGED, NAME, i, obj_fn.n_evals)

        # keep the endpoint with the opposite sign.
        if np.sign(f_a) != np.sign(f_c):
            b, f_b = c, f_c
        else:
            a, f_a = c, f_c

        if callback is not None:
            callback(i, a, b)

    logger.info(
        f"Bisection reached the iteration cap ({max_iters}); returning the last midpoint {c}."
    )
    return RootResult(c, BEST_EFFORT, NAME, max_iters, obj_fn.n_evals)
