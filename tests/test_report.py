import math
import re

import pytest

from bvpsolve.report import (
    Report,
    ResultRow,
    TaskKind,
    build_report,
    format_e3,
    solve,
)


def test_format_e3_pinned_values():
    assert format_e3(1.0) == "1.000E+000"
    assert format_e3(-0.00025) == "-2.500E-004"


@pytest.mark.parametrize("value", [3.14159, -2718.28, 1e-12, 6.02e23, 0.5])
def test_format_e3_shape_and_round_trip(value):
    text = format_e3(value)
    assert re.fullmatch(r"-?\d\.\d{3}E[+-]\d{3}", text)
    assert float(text) == pytest.approx(value, rel=1e-3)


def test_format_e3_non_finite():
    assert format_e3(math.nan) == "NaN"
    assert format_e3(math.inf) == "Infinity"
    assert format_e3(-math.inf) == "-Infinity"


def test_build_report_test_task_finds_largest_difference():
    report = build_report(TaskKind.TEST, [0.0, 0.0, 0.0], [0.0, -0.75, 0.25])
    assert report.max_difference == pytest.approx(0.75)
    assert report.max_difference_x == pytest.approx(1 / 3)
    assert [row.index for row in report.rows] == [0, 1, 2]
    assert all(row.difference == row.primary - row.secondary for row in report.rows)


def test_build_report_main_task_uses_even_half_step_nodes():
    report = build_report(TaskKind.MAIN, [1.0, 2.0, 3.0], [1.0, 9.0, 2.0, 9.0, 3.0])
    assert [row.secondary for row in report.rows] == [1.0, 2.0, 3.0]
    assert report.max_difference == 0.0
    assert report.max_difference_x == 0.0


def test_build_report_rejects_bad_input():
    with pytest.raises(ValueError):
        build_report(TaskKind.TEST, [], [])
    with pytest.raises(ValueError):
        build_report(TaskKind.TEST, [1.0, 2.0], [1.0])
    with pytest.raises(ValueError):
        build_report(TaskKind.MAIN, [1.0, 2.0, 3.0], [1.0, 2.0, 3.0])


def test_summary_lines_test_task():
    report = build_report(TaskKind.TEST, [0.0, 0.0, 0.0], [0.0, -0.75, 0.25])
    lines = report.summary_lines()
    assert len(lines) == 8
    assert lines[0] == "Для решения задачи использована равномерная"
    assert lines[1] == f"сетка c числом разбиений n = {len(report.rows) - 1};"
    assert lines[4] == "с погрешностью e1 = " + format_e3(report.max_difference) + ";"
    assert lines[-1] == "x = " + format_e3(report.max_difference_x)


def test_summary_lines_main_task():
    report = build_report(TaskKind.MAIN, [1.0, 2.0], [1.0, 0.0, 2.5])
    lines = report.summary_lines()
    assert lines[2] == "Задача должна быть решена с заданной"
    assert lines[4] == "с точночтью e2 = " + format_e3(report.max_difference) + ";"
    assert lines[-1] == "x = " + format_e3(report.max_difference_x)


def test_table_lines():
    report = build_report(TaskKind.MAIN, [1.0, 2.0], [1.0, 0.0, 2.5])
    lines = report.table_lines()
    assert lines[0] == "i\tx_i\tv_i\tv2_i\tv_i - v2_i"
    assert len(lines) == 1 + len(report.rows)
    cells = lines[2].split("\t")
    assert cells[0] == "1"
    assert cells[2] == format_e3(2.0)
    assert cells[3] == format_e3(2.5)


def test_row_cells_match_values():
    row = ResultRow(index=4, x=0.5, primary=1.0, secondary=-0.00025, difference=1.00025)
    assert row.cells()[0] == "4"
    assert row.cells()[3] == format_e3(-0.00025)


def test_solve_test_task_is_accurate():
    report = solve(TaskKind.TEST, 10)
    assert isinstance(report, Report)
    assert len(report.rows) == 11
    assert report.max_difference < 1e-2
    assert report.rows[0].primary == pytest.approx(2.0)
    assert report.rows[-1].primary == pytest.approx(1.0)


def test_solve_main_task_boundaries_agree():
    report = solve(TaskKind.MAIN, 10)
    assert len(report.rows) == 11
    assert report.rows[0].difference == pytest.approx(0.0)
    assert report.rows[-1].difference == pytest.approx(0.0)
    assert report.max_difference >= 0.0
    assert report.max_difference < 1e-2


def test_solve_rejects_nonpositive_n():
    with pytest.raises(ValueError):
        solve(TaskKind.TEST, 0)


def test_task_labels_and_values():
    assert TaskKind("test") is TaskKind.TEST
    assert TaskKind.TEST.secondary_label == "аналитическое решение"
    assert TaskKind.MAIN.difference_label == "разность численных решений в общих узлах"