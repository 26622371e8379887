# bvpsolve

Numerical solution of the boundary value problem

    -(k(x) u')' + q(x) u = f(x),   0 < x < 1,   u(0) = 2,   u(1) = 1,

whose coefficients `k`, `q` and `f` take one form left of the interface point
`ψ = 1/√3` and another form right of it.

The problem is discretised with a balance (integro-interpolation) scheme on a
uniform grid, the cell averages being taken with Simpson-style weights, and the
resulting tridiagonal system is solved by the sweep (Thomas) method.

Two problems are available:

* **test** — the coefficients are frozen at their values in `ψ` on each side
  of the interface, so the analytic solution is known and the numerical
  result is compared with it;
* **main** — the full variable coefficients; accuracy is estimated by solving
  again with half the step and comparing the two solutions at the common
  nodes.

## Installation

```
pip install .
```

## Command line

```
bvpsolve
```

Solves the test problem on 10000 intervals and prints a summary (in Russian):
the number of grid intervals, the maximum difference reached and the point `x`
where it occurs. Options:

* `--task {test,main}` — problem to solve (default `test`);
* `-n N`, `--intervals N` — number of grid intervals (default 10000);
* `--table` — also print the tab-separated node-by-node table;
* `--plot PATH` — save an image with the two solutions and their difference
  to `PATH` (the format follows the file extension).

An invalid number of intervals (less than 1) is reported as a usage error.

## Library use

```python
from bvpsolve.scheme import calc_test_task, true_solution, compare_test_solutions
from bvpsolve.report import TaskKind, solve

v = calc_test_task(1000)          # numerical solution, 1001 nodes
u = true_solution(1000)           # analytic solution at the same nodes
err = compare_test_solutions(1000)
print(err)                        # MaxError(value=..., index=..., x=...)

report = solve(TaskKind.MAIN, 1000)
print("\n".join(report.summary_lines()))
print("\n".join(report.table_lines()))
```

`bvpsolve.scheme` also provides:

* `Coefficients` — the six coefficient functions, with `frozen_at(point)`
  returning constant coefficients; `MAIN_COEFFICIENTS` and `TEST_COEFFICIENTS`
  are the two problems;
* `calc_ai`, `calc_di`, `calc_fi` — scheme averages for coefficient functions
  of your own;
* `lower_diagonal`, `main_diagonal`, `upper_diagonal`, `rhs_column` — system
  assembly;
* `solve_tridiagonal` and `residual_norm` — the sweep method and the maximum
  residual of a solution;
* `applicability_violations` — rows where the sweep method's sufficient
  conditions fail (`calc_main_task` logs a warning for each);
* `exact_solution(x)` — the analytic solution of the test problem;
* `find_optimal_n_test(target_error=0.5e-6)` — the first `n` in
  10, 1010, 2010, … whose test-problem error meets the target.

`bvpsolve.report` provides `TaskKind`, `build_report` for comparing any two
solutions, `Report` with `summary_lines()` and `table_lines()`, `ResultRow`,
and `format_e3` for exponent formatting such as `1.234E-005`.

Invalid arguments raise `ValueError`.

## What it does not do

There is no interactive window: results are printed as text, and plots are
only written to an image file with `--plot` or `bvpsolve.cli.plot_report`.

## Tests

```
pip install .[test]
pytest
```