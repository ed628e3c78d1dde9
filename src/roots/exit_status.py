"""
Result type and failure taxonomy for the root-finders.
"""
from typing import Optional, Dict, Any

# status codes

CONVERGED = "converged"
BEST_EFFORT = "best_effort"
NO_SIGN_CHANGE = "no_sign_change"
STALL_DETECTED = "stall_detected"
ZERO_DERIVATIVE = "zero_derivative"
OUT_OF_BOUNDS = "out_of_bounds"
MAX_ITERATIONS_EXCEEDED = "max_iterations_exceeded"

FAILURES = [
    NO_SIGN_CHANGE,
    STALL_DETECTED,
    ZERO_DERIVATIVE,
    OUT_OF_BOUNDS,
    MAX_ITERATIONS_EXCEEDED,
]

STATUSES = [CONVERGED, BEST_EFFORT] + FAILURES

# exceptions


class RootFindingError(RuntimeError):

    """Base class for root-finding failures raised by `RootResult.unwrap`."""

    def __init__(self, message: str, result: "RootResult"):
        super().__init__(message)
        self.result = result


class NoSignChangeError(RootFindingError):
    """f(a) and f(b) have the same sign."""


class StallDetectedError(RootFindingError):
    """The denominator of an interpolation or secant step vanished."""


class ZeroDerivativeError(RootFindingError):
    """The derivative vanished at a Newton iterate."""


class OutOfBoundsError(RootFindingError):
    """An open method stepped outside of the trusted interval."""


class MaxIterationsExceededError(RootFindingError):
    """The iteration cap was reached before the tolerance was met."""


_ERRORS = {
    NO_SIGN_CHANGE: NoSignChangeError,
    STALL_DETECTED: StallDetectedError,
    ZERO_DERIVATIVE: ZeroDerivativeError,
    OUT_OF_BOUNDS: OutOfBoundsError,
    MAX_ITERATIONS_EXCEEDED: MaxIterationsExceededError,
}

# result


class RootResult:

    """Outcome of a single call to a root-finder.

    Exactly one of two things is true: `root` holds an estimate of the root
    (status is CONVERGED or BEST_EFFORT), or `root` is None and `status` names
    the reason for failure.
    """

    root: Optional[float]
    status: str
    method: str
    n_iters: int
    n_evals: int

    def __init__(
        self,
        root: Optional[float],
        status: str,
        method: str,
        n_iters: int = 0,
        n_evals: int = 0,
    ):
        """
        :param root: the root estimate, or None if the method failed.
        :param status: one of the status codes defined in this module.
        :param method: name of the method which produced the result.
        :param n_iters: (optional) the number of iterations completed.
        :param n_evals: (optional) the number of function (and derivative) evaluations.
        """
        if status not in STATUSES:
            raise ValueError(f"Status {status} not recognized!")
        if (root is None) != (status in FAILURES):
            raise ValueError(
                f"A result with status {status} must {'not ' if status in FAILURES else ''}carry a root."
            )

        self.root = root
        self.status = status
        self.method = method
        self.n_iters = n_iters
        self.n_evals = n_evals

    @property
    def success(self) -> bool:
        """Whether or not a root estimate is available."""
        return self.root is not None

    @property
    def converged(self) -> bool:
        """Whether or not the estimate satisfies the convergence tolerance."""
        return self.status == CONVERGED

    def unwrap(self) -> float:
        """Return the root estimate or raise the error matching the failure.
        :returns: the root estimate.
        """
        if self.root is None:
            raise _ERRORS[self.status](
                f"{self.method} failed after {self.n_iters} iterations: {self.status}.",
                self,
            )

        return self.root

    def exit_status(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "converged": self.converged,
            "status": self.status,
            "n_iters": self.n_iters,
            "n_evals": self.n_evals,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RootResult):
            return NotImplemented

        return (
            self.root == other.root
            and self.status == other.status
            and self.method == other.method
            and self.n_iters == other.n_iters
            and self.n_evals == other.n_evals
        )

    def __repr__(self) -> str:
        return (
            f"RootResult(root={self.root!r}, status={self.status!r}, method={self.method!r}, "
            f"n_iters={self.n_iters}, n_evals={self.n_evals})"
        )
