"""Tabulated comparison of two grid solutions, with the summary text shown to the user."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from bvpsolve.scheme import calc_main_task, calc_test_task, true_solution


class TaskKind(Enum):
    """Which boundary value problem is solved and compared."""

    TEST = "test"
    MAIN = "main"

    @property
    def headers(self) -> tuple[str, ...]:
        """Column headers of the result table."""
        if self is TaskKind.TEST:
            return ("i", "x_i", "u_i", "v_i", "u_i - v_i")
        return ("i", "x_i", "v_i", "v2_i", "v_i - v2_i")

    @property
    def primary_label(self) -> str:
        """Legend of the first curve."""
        return "численное решение"

    @property
    def secondary_label(self) -> str:
        """Legend of the curve the first one is compared with."""
        if self is TaskKind.TEST:
            return "аналитическое решение"
        return "численное решение с половинным шагом"

    @property
    def difference_label(self) -> str:
        """Legend of the difference curve."""
        if self is TaskKind.TEST:
            return "разность аналитического и численного решения"
        return "разность численных решений в общих узлах"


def format_e3(value: float) -> str:
    """Format a number in exponent notation with three decimals and a three-digit exponent."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    mantissa, exponent = f"{value:.3E}".split("E")
    sign = exponent[0]
    digits = exponent[1:].rjust(3, "0")
    return f"{mantissa}E{sign}{digits}"


@dataclass(frozen=True)
class ResultRow:
    """One grid node of the comparison table."""

    index: int
    x: float
    primary: float
    secondary: float
    difference: float

    def cells(self) -> tuple[str, ...]:
        """Text of the row's table cells."""
        return (
            str(self.index),
            format_e3(self.x),
            format_e3(self.primary),
            format_e3(self.secondary),
            format_e3(self.difference),
        )


@dataclass(frozen=True)
class Report:
    """Comparison of a numerical solution with a reference on a common grid."""

    task: TaskKind
    rows: tuple[ResultRow, ...]
    max_difference: float
    max_difference_x: float

    @property
    def intervals(self) -> int:
        """Number of grid intervals."""
        return len(self.rows) - 1

    def summary_lines(self) -> list[str]:
        """Descriptive lines about the grid, the accuracy reached and where the error peaks."""
        if self.task is TaskKind.MAIN:
            return [
                "Для решения задачи использована равномерная",
                f"сетка c числом разбиений n = {self.intervals};",
                "Задача должна быть решена с заданной",
                "точностью e = 5E–007; задача решена",
                f"с точночтью e2 = {format_e3(self.max_difference)};",
                "Максимальня разность численных решений",
                "в общих узлах сетки наблюдается в точке",
                f"x = {format_e3(self.max_difference_x)}",
            ]
        return [
            "Для решения задачи использована равномерная",
            f"сетка c числом разбиений n = {self.intervals};",
            "Задача должна быть решена с погрешностью",
            "не более e = 5E–007; задача решена",
            f"с погрешностью e1 = {format_e3(self.max_difference)};",
            "Максимальное отклонение аналитического",
            "и численного решений наблюдается в точке",
            f"x = {format_e3(self.max_difference_x)}",
        ]

    def table_lines(self) -> list[str]:
        """Tab-separated table: a header line followed by one line per node."""
        lines = ["\t".join(self.task.headers)]
        lines.extend("\t".join(row.cells()) for row in self.rows)
        return lines


def build_report(task: TaskKind, primary: Sequence[float], secondary: Sequence[float]) -> Report:
    """Compare ``primary`` with ``secondary`` node by node.

    For the test task both sequences share the grid; for the main task
    ``secondary`` lies on the grid of half the step, so its even nodes are used.
    """
    primary = list(primary)
    secondary = list(secondary)
    if not primary:
        raise ValueError("primary solution must not be empty")
    if task is TaskKind.TEST:
        if len(secondary) != len(primary):
            raise ValueError(
                f"reference must have {len(primary)} values, got {len(secondary)}"
            )
        reference = secondary
    else:
        needed = 2 * (len(primary) - 1) + 1
        if len(secondary) < needed:
            raise ValueError(
                f"half-step solution must have at least {needed} values, got {len(secondary)}"
            )
        reference = secondary[::2][: len(primary)]

    size = len(primary)
    rows = []
    max_difference, max_x = -1.0, -1.0
    for index, (value, ref) in enumerate(zip(primary, reference)):
        x = index / size
        difference = value - ref
        if abs(difference) > max_difference:
            max_difference = abs(difference)
            max_x = x
        rows.append(ResultRow(index, x, value, ref, difference))
    return Report(task, tuple(rows), max_difference, max_x)


def solve(task: TaskKind, n: int) -> Report:
    """Solve the chosen task on n intervals and compare it with its reference."""
    if task is TaskKind.TEST:
        reference = true_solution(n)
        numerical = calc_test_task(n)
    else:
        numerical = calc_main_task(n)
        reference = calc_main_task(2 * n)
    return build_report(task, numerical, reference)