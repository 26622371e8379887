"""Balance-method finite-difference scheme for a two-region boundary value problem.

The problem is

    -(k(x) u')' + q(x) u = f(x),   0 < x < 1,   u(0) = mu1,   u(1) = mu2,

where every coefficient takes one form left of the interface point ``psi``
and another form right of it.  The integral averages of the scheme are taken
with Simpson-style weights, and the resulting tridiagonal system is solved by
the sweep (Thomas) method.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Iterator, Sequence

logger = logging.getLogger(__name__)

Function = Callable[[float], float]

LEFT_END = 0.0
RIGHT_END = 1.0
MU1 = 2.0
MU2 = 1.0
PSI = 1.0 / math.sqrt(3.0)

_TOUCH_EPS = 1e-14
_MAX_SEARCH_N = 10_000_000
_SEARCH_START_N = 10
_SEARCH_STEP_N = 1000

# Constants of the analytic solution of the test problem.
EXACT_A = 0.58713364002861877025803583224850669768296290762799
EXACT_B = 3.412866359971381229741964167751493302317037092372
EXACT_C = -0.11620934500084417511626982342917373525649977045689
EXACT_D = 0.93630688062153035342809225482419632831655290451774
EXACT_ALPHA = 0.89227008278746162739521688624670878476520943583276


def _constant(value: float) -> Function:
    return lambda _x: value


@dataclass(frozen=True)
class Coefficients:
    """Coefficient functions of the equation on both sides of the interface."""

    k1: Function
    k2: Function
    q1: Function
    q2: Function
    f1: Function
    f2: Function

    def frozen_at(self, point: float) -> "Coefficients":
        """Return coefficients held constant at their values in ``point``."""
        return Coefficients(
            k1=_constant(self.k1(point)),
            k2=_constant(self.k2(point)),
            q1=_constant(self.q1(point)),
            q2=_constant(self.q2(point)),
            f1=_constant(self.f1(point)),
            f2=_constant(self.f2(point)),
        )


MAIN_COEFFICIENTS = Coefficients(
    k1=lambda x: 1.0,
    k2=lambda x: math.exp(x * x),
    q1=lambda x: x * x,
    q2=lambda x: 1.0 + x**4,
    f1=lambda x: x * x - 1.0,
    f2=lambda x: 1.0,
)

TEST_COEFFICIENTS = MAIN_COEFFICIENTS.frozen_at(PSI)


@dataclass(frozen=True)
class MaxError:
    """Largest deviation between numerical and analytic solutions."""

    value: float
    index: int
    x: float


def _check_n(n: int) -> None:
    if n < 1:
        raise ValueError(f"number of intervals must be at least 1, got {n}")


def _nodes(a: float, h: float, count: int) -> Iterator[float]:
    """Yield ``count`` nodes after ``a``, accumulating the step as the scheme does."""
    xi = a
    for _ in range(count):
        xi += h
        yield xi


def calc_ai(a: float, b: float, n: int, psi: float, k1: Function, k2: Function) -> list[float]:
    """Averaged conductivity coefficients a_1..a_n of the scheme."""
    _check_n(n)
    h = (b - a) / n

    def coefficient(xi: float) -> float:
        if psi > xi or abs(psi - xi) < _TOUCH_EPS:
            return 5.0 / (1.0 / k1(xi - h) + 3.0 / k1(2 * xi - h) + 1.0 / k1(xi))
        if xi - h < psi < xi:
            left = (psi - xi + h) * (1.0 / k1(xi - h) + 3.0 / k1(xi - h + psi) + 1.0 / k1(psi))
            right = (xi - psi) * (1.0 / k2(psi) + 3.0 / k2(xi + psi) + 1.0 / k2(xi))
            return (5.0 * h) / (left + right)
        return 5.0 / (1.0 / k2(xi - h) + 3.0 / k2(2 * xi - h) + 1.0 / k2(xi))

    return [coefficient(xi) for xi in _nodes(a, h, n)]


def _cell_averages(a: float, b: float, n: int, psi: float, g1: Function, g2: Function) -> list[float]:
    _check_n(n)
    h = (b - a) / n
    half = 0.5 * h

    def average(xi: float) -> float:
        if psi > xi + half or abs(psi - xi - half) < _TOUCH_EPS:
            return (g1(xi - half) + g1(xi + half) + 3.0 * g1(2.0 * xi)) / 5.0
        if xi - half < psi < xi + half:
            left = (psi - xi + half) * (g1(xi - half) + 3.0 * g1(xi - half + psi) + g1(psi))
            right = (xi + half - psi) * (g2(xi + half) + 3.0 * g2(xi + half + psi) + g2(psi))
            return (left + right) / (5.0 * h)
        return (g2(xi - half) + g2(xi + half) + 3.0 * g2(2.0 * xi)) / 5.0

    return [average(xi) for xi in _nodes(a, h, n - 1)]


def calc_di(a: float, b: float, n: int, psi: float, q1: Function, q2: Function) -> list[float]:
    """Averaged reaction coefficients d_1..d_{n-1} at interior nodes."""
    return _cell_averages(a, b, n, psi, q1, q2)


def calc_fi(a: float, b: float, n: int, psi: float, f1: Function, f2: Function) -> list[float]:
    """Averaged right-hand side values phi_1..phi_{n-1} at interior nodes."""
    return _cell_averages(a, b, n, psi, f1, f2)


def lower_diagonal(ai: Sequence[float], h: float) -> list[float]:
    """Sub-diagonal entries a_i / h^2 for the interior equations."""
    return [value / (h * h) for value in ai[:-1]]


def main_diagonal(ai: Sequence[float], di: Sequence[float], h: float) -> list[float]:
    """Diagonal entries d_i + (a_i + a_{i+1}) / h^2 for the interior equations."""
    return [d + (left + right) / (h * h) for d, left, right in zip(di, ai, ai[1:])]


def upper_diagonal(ai: Sequence[float], h: float) -> list[float]:
    """Super-diagonal entries a_{i+1} / h^2 for the interior equations."""
    return [value / (h * h) for value in ai[1:]]


def rhs_column(mu1: float, mu2: float, fi: Sequence[float]) -> list[float]:
    """Right-hand column: boundary values around the interior right-hand sides."""
    return [mu1, *fi, mu2]


def _check_system(lower: Sequence[float], main: Sequence[float], upper: Sequence[float], size: int) -> None:
    interior = size - 2
    if not len(lower) == len(main) == len(upper) == max(interior, 0):
        raise ValueError(
            f"diagonals must each hold {max(interior, 0)} entries for a system of size {size}, "
            f"got {len(lower)}, {len(main)}, {len(upper)}"
        )


def solve_tridiagonal(
    lower: Sequence[float],
    main: Sequence[float],
    upper: Sequence[float],
    rhs: Sequence[float],
) -> list[float]:
    """Solve the boundary-bordered system by the sweep method.

    Interior rows read ``lower*y[i-1] - main*y[i] + upper*y[i+1] = -rhs[i]``;
    the first and last rows fix ``y`` to ``rhs`` at the ends.
    """
    rhs = list(rhs)
    if not rhs:
        raise ValueError("right-hand side must not be empty")
    if len(rhs) == 1:
        return [rhs[0]]
    _check_system(lower, main, upper, len(rhs))

    alpha = [0.0]
    beta = [rhs[0]]
    for sub, diag, sup, value in zip(lower, main, upper, rhs[1:-1]):
        denominator = diag - sub * alpha[-1]
        alpha.append(sup / denominator)
        beta.append((value + sub * beta[-1]) / denominator)

    solution = [rhs[-1]]
    for a_coef, b_coef in zip(reversed(alpha), reversed(beta)):
        solution.append(a_coef * solution[-1] + b_coef)
    solution.reverse()
    return solution


def residual_norm(
    lower: Sequence[float],
    main: Sequence[float],
    upper: Sequence[float],
    rhs: Sequence[float],
    y: Sequence[float],
) -> float:
    """Maximum absolute residual of ``y`` in the system solved by :func:`solve_tridiagonal`."""
    y = list(y)
    rhs = list(rhs)
    if not y or len(y) != len(rhs):
        raise ValueError("solution and right-hand side must be non-empty and of equal length")
    if len(y) == 1:
        return abs(y[0] - rhs[0])
    _check_system(lower, main, upper, len(y))

    residuals = [abs(y[0] - rhs[0]), abs(y[-1] - rhs[-1])]
    residuals.extend(
        abs(sub * prev - diag * cur + sup * nxt + value)
        for (prev, cur, nxt), sub, diag, sup, value in zip(
            zip(y, y[1:], y[2:]), lower, main, upper, rhs[1:-1]
        )
    )
    return max(residuals)


def applicability_violations(
    lower: Sequence[float], main: Sequence[float], upper: Sequence[float]
) -> list[int]:
    """Indices of rows where the sweep method's sufficient conditions fail.

    A row is flagged when it is not diagonally dominant, when its sub-diagonal
    entry is (nearly) zero, or when any of its entries is negative.
    """
    return [
        index
        for index, (sub, diag, sup) in enumerate(zip(lower, main, upper))
        if abs(diag) < abs(sub) + abs(sup) or abs(sub) < 1e-8 or sup < 0 or sub < 0 or diag < 0
    ]


def _assemble(n: int, coefficients: Coefficients) -> tuple[list[float], list[float], list[float], list[float]]:
    _check_n(n)
    h = (RIGHT_END - LEFT_END) / n
    ai = calc_ai(LEFT_END, RIGHT_END, n, PSI, coefficients.k1, coefficients.k2)
    di = calc_di(LEFT_END, RIGHT_END, n, PSI, coefficients.q1, coefficients.q2)
    fi = calc_fi(LEFT_END, RIGHT_END, n, PSI, coefficients.f1, coefficients.f2)
    return (
        lower_diagonal(ai, h),
        main_diagonal(ai, di, h),
        upper_diagonal(ai, h),
        rhs_column(MU1, MU2, fi),
    )


def calc_test_task(n: int) -> list[float]:
    """Numerical solution of the test problem (coefficients frozen at ``psi``) on n intervals."""
    lower, main, upper, rhs = _assemble(n, TEST_COEFFICIENTS)
    solution = solve_tridiagonal(lower, main, upper, rhs)
    logger.debug("test task n=%d residual %g", n, residual_norm(lower, main, upper, rhs, solution))
    return solution


def calc_main_task(n: int) -> list[float]:
    """Numerical solution of the main problem on n intervals."""
    lower, main, upper, rhs = _assemble(n, MAIN_COEFFICIENTS)
    for index in applicability_violations(lower, main, upper):
        logger.warning("sweep applicability condition violated at row %d", index)
    solution = solve_tridiagonal(lower, main, upper, rhs)
    logger.debug("main task n=%d residual %g", n, residual_norm(lower, main, upper, rhs, solution))
    return solution


def _exact_left(x: float) -> float:
    root = math.sqrt(3.0)
    return EXACT_A * math.exp(x / root) + EXACT_B * math.exp(-x / root) - 2.0


def _exact_right(x: float) -> float:
    return EXACT_C * math.exp(EXACT_ALPHA * x) + EXACT_D * math.exp(-EXACT_ALPHA * x) + 0.9


def exact_solution(x: float) -> float:
    """Analytic solution of the test problem; the mean of both branches at ``psi``."""
    if x < PSI:
        return _exact_left(x)
    if x > PSI:
        return _exact_right(x)
    return (_exact_left(x) + _exact_right(x)) / 2.0


def true_solution(n: int) -> list[float]:
    """Analytic solution of the test problem sampled at the n+1 grid nodes."""
    _check_n(n)
    h = (RIGHT_END - LEFT_END) / n
    return [exact_solution(LEFT_END + i * h) for i in range(n + 1)]


def compare_test_solutions(n: int) -> MaxError:
    """Largest deviation of the numerical test solution from the analytic one."""
    _check_n(n)
    h = (RIGHT_END - LEFT_END) / n
    numerical = calc_test_task(n)
    worst = MaxError(0.0, 0, 0.0)
    for index, value in enumerate(numerical):
        x = LEFT_END + index * h
        error = abs(exact_solution(x) - value)
        if error > worst.value:
            worst = MaxError(error, index, x)
    return worst


def find_optimal_n_test(target_error: float = 0.5e-6) -> int:
    """Smallest n in 10, 1010, 2010, ... whose test-problem error meets ``target_error``.

    If the bound of ten million intervals passes without success, the first
    n beyond it is returned.
    """
    n = _SEARCH_START_N
    while n <= _MAX_SEARCH_N:
        error = compare_test_solutions(n).value
        logger.info("n=%d error=%e", n, error)
        if error <= target_error:
            logger.info("accuracy achieved")
            break
        n += _SEARCH_STEP_N
    return n