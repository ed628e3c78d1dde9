"""
Look up root-finders by name and call them through a uniform interface.
"""
import logging
from functools import partial
from typing import Callable, Dict, Any, Optional

from roots.constants import TOL, MAX_ITERS
from roots.exit_status import RootResult
from roots.logs import get_logger
from roots.bisection import bisection
from roots.regula_falsi import regula_falsi
from roots.newton import newton
from roots.secant import secant

# constants

BISECTION = "bisection"
REGULA_FALSI = "regula_falsi"
NEWTON = "newton"
SECANT = "secant"

BRACKETING_METHODS = [BISECTION, REGULA_FALSI]
OPEN_METHODS = [NEWTON, SECANT]
METHODS = BRACKETING_METHODS + OPEN_METHODS

_SOLVERS: Dict[str, Callable[..., RootResult]] = {
    BISECTION: bisection,
    REGULA_FALSI: regula_falsi,
    NEWTON: newton,
    SECANT: secant,
}

# index


def get_solver(config: Dict[str, Any]) -> Callable[..., RootResult]:
    """Load a root-finder by name using the passed configuration parameters.
    :param config: configuration object specifying the root-finder. Recognized keys are
        'name' (required), 'tol' and 'max_iters'.
    :returns: the root-finder with its options bound.
    """
    name = config.get("name", None)

    if name is None:
        raise ValueError("Root-finder must have name!")
    elif name not in _SOLVERS:
        raise ValueError(f"Root-finder {name} not recognized!")

    return partial(
        _SOLVERS[name],
        tol=config.get("tol", TOL),
        max_iters=config.get("max_iters", MAX_ITERS),
    )


def find_root(
    method: str,
    f: Callable[[float], float],
    a: float,
    b: float,
    x0: Optional[float] = None,
    g: Optional[Callable[[float], float]] = None,
    tol: float = TOL,
    max_iters: int = MAX_ITERS,
    verbose: bool = False,
    logger: Optional[logging.Logger] = None,
) -> RootResult:
    """Find a root of 'f' with the named method.
    :param method: one of METHODS.
    :param f: the function whose root should be found.
    :param a: lower endpoint of the bracket (bracketing methods) or trusted interval (open methods).
    :param b: upper endpoint of the bracket or trusted interval.
    :param x0: (optional) initial guess. Required by the open methods and ignored otherwise.
    :param g: (optional) derivative of 'f'. Required by Newton's method and ignored otherwise.
    :param tol: (optional) convergence tolerance.
    :param max_iters: (optional) the maximum number of iterations to run.
    :param verbose: (optional) whether or not to log failures at the INFO level.
    :param logger: (optional) a logging instance to use.
    :returns: a RootResult.
    """
    solver = get_solver({"name": method, "tol": tol, "max_iters": max_iters})

    # without a logger each solver logs to its own module logger.
    if logger is None and verbose:
        logger = get_logger("roots", verbose)

    if method in OPEN_METHODS and x0 is None:
        raise ValueError(f"Method {method} requires an initial guess 'x0'!")

    if method == NEWTON:
        if g is None:
            raise ValueError("Newton's method requires the derivative 'g'!")
        return solver(f, g, a, b, x0, logger=logger)
    elif method == SECANT:
        return solver(f, a, b, x0, logger=logger)

    return solver(f, a, b, logger=logger)
