# src/isaschedule/solver.py
"""
Equivalent fixed interest rate of an income-sharing agreement.

Solves ``principal · (1 + r)^n = final_threshold`` for ``r`` with
Newton-Raphson, i.e. the annual rate at which a conventional loan of the
same principal would grow to the threshold reached by the agreement.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from isaschedule.logging import getLogger

if TYPE_CHECKING:  # pragma: no cover
    from isaschedule.results import ScheduleResult

INITIAL_GUESS = 0.10
EPSILON = 1e-7
MAX_ITERATIONS = 100

log = getLogger(__name__)


def newton_raphson(
    total_paid: float,
    principal: float,
    years: int,
    *,
    initial_guess: float = INITIAL_GUESS,
    epsilon: float = EPSILON,
    max_iterations: int = MAX_ITERATIONS,
) -> float:
    """
    Root of f(r) = P · (1 + r)^n − A.

    Parameters
    ----------
    total_paid : float
        Amount ``A`` the principal must grow to.
    principal : float
        Principal ``P`` (positive).
    years : int
        Number of compounding periods ``n`` (positive).
    initial_guess : float, default 0.10
        Starting rate ``r₀``.
    epsilon : float, default 1e-7
        Convergence tolerance on successive rates.
    max_iterations : int, default 100
        Iteration cap.

    Returns
    -------
    float
        The converged rate, or the last approximation if the iteration cap
        is reached.

    Notes
    -----
    f'(r) = n · P · (1 + r)^(n−1), r_{k+1} = r_k − f(r_k) / f'(r_k).
    """
    r = initial_guess
    for i in range(max_iterations):
        f = principal * (1 + r) ** years - total_paid
        f_prime = years * principal * (1 + r) ** (years - 1)

        r_new = r - f / f_prime
        if abs(r_new - r) < epsilon:
            log.debug(f"  Newton-Raphson converged after {i + 1} iterations")
            return r_new
        r = r_new

    log.warning(
        f"Newton-Raphson did not converge in {max_iterations} iterations, "
        f"returning last approximation r={r:.6f}"
    )
    return r


def equivalent_interest_rate(
    final_threshold: float, principal: float, total_years: int
) -> float:
    """
    Annual rate that compounds *principal* to *final_threshold*.

    Returns ``0.0`` when the threshold does not exceed the principal.

    Examples
    --------
    >>> round(equivalent_interest_rate(20_000.0, 10_000.0, 1), 6)
    1.0
    >>> equivalent_interest_rate(10_000.0, 10_000.0, 5)
    0.0
    """
    if final_threshold <= principal:
        return 0.0

    return newton_raphson(final_threshold, principal, total_years)


def equivalent_rate_for(result: ScheduleResult) -> float:
    """Equivalent interest rate of a finished schedule."""
    return equivalent_interest_rate(
        result.final_threshold, result.principal, result.total_years_simulated
    )
