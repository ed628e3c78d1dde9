"""
Helpers for caller-supplied functions and options.
"""
from typing import Callable

import numpy as np


class Objective:

    """Scalar function that records how many times it has been evaluated.
    A fresh instance is created for every solve so no state leaks between calls.
    """

    n_evals: int

    def __init__(self, fn: Callable[[float], float]):
        """
        :param fn: a function mapping a float to a float.
        """
        if not callable(fn):
            raise ValueError(f"Expected a callable objective, got {type(fn).__name__}!")

        self.fn = fn
        self.n_evals = 0

    def __call__(self, x: float) -> float:
        self.n_evals += 1
        return float(self.fn(x))


def check_options(tol: float, max_iters: int):
    """Validate the shared solver options.
    :param tol: the convergence tolerance; must be positive.
    :param max_iters: the iteration cap; must be a positive integer.
    """
    if not tol > 0:
        raise ValueError(f"Tolerance must be positive, got {tol}!")
    if not isinstance(max_iters, (int, np.integer)) or max_iters < 1:
        raise ValueError(f"Iteration cap must be a positive integer, got {max_iters}!")
