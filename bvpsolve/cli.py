"""Command line front end: solve a task, print the summary and optionally plot it."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from matplotlib.figure import Figure

from bvpsolve.report import Report, TaskKind, solve

DEFAULT_INTERVALS = 10000
_AXIS_X = "X ось"
_AXIS_Y = "V ось"


def plot_report(report: Report, path: str | Path) -> Path:
    """Draw the solutions and their difference side by side and save the image to ``path``."""
    target = Path(path)
    xs = [row.x for row in report.rows]

    figure = Figure(figsize=(12, 5))
    solutions, differences = figure.subplots(1, 2)

    solutions.plot(
        xs,
        [row.primary for row in report.rows],
        color="red",
        marker="+",
        label=report.task.primary_label,
    )
    solutions.plot(
        xs,
        [row.secondary for row in report.rows],
        color="blue",
        marker="o",
        fillstyle="none",
        label=report.task.secondary_label,
    )
    differences.plot(
        xs,
        [row.difference for row in report.rows],
        color="green",
        marker="o",
        fillstyle="none",
        label=report.task.difference_label,
    )

    for axes in (solutions, differences):
        axes.set_xlabel(_AXIS_X)
        axes.set_ylabel(_AXIS_Y)
        axes.autoscale(axis="y")
        axes.grid(True)
        axes.legend()

    figure.tight_layout()
    figure.savefig(target)
    return target


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bvpsolve",
        description="Solve a two-region boundary value problem by the balance method.",
    )
    parser.add_argument(
        "--task",
        choices=[kind.value for kind in TaskKind],
        default=TaskKind.TEST.value,
        help="problem to solve (default: test)",
    )
    parser.add_argument(
        "-n",
        "--intervals",
        type=int,
        default=DEFAULT_INTERVALS,
        help=f"number of grid intervals (default: {DEFAULT_INTERVALS})",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="print the node-by-node table after the summary",
    )
    parser.add_argument(
        "--plot",
        metavar="PATH",
        help="save plots of the solutions and their difference to PATH",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    task = TaskKind(args.task)

    try:
        report = solve(task, args.intervals)
    except ValueError as error:
        parser.error(str(error))

    out = sys.stdout
    for line in report.summary_lines():
        print(line, file=out)
    if args.table:
        print(file=out)
        for line in report.table_lines():
            print(line, file=out)
    if args.plot:
        plot_report(report, args.plot)
    return 0


if __name__ == "__main__":
    sys.exit(main())