import pytest

from bvpsolve.cli import main, plot_report
from bvpsolve.report import TaskKind, build_report, solve


def test_test_task_summary(capsys):
    status = main(["--task", "test", "-n", "10"])
    out = capsys.readouterr().out.splitlines()
    assert status == 0
    assert out[0] == "Для решения задачи использована равномерная"
    assert "сетка c числом разбиений n = 10;" in out
    assert out[-1].startswith("x = ")


def test_main_task_summary(capsys):
    status = main(["--task", "main", "-n", "8"])
    out = capsys.readouterr().out.splitlines()
    assert status == 0
    assert "сетка c числом разбиений n = 8;" in out
    assert "Максимальня разность численных решений" in out


def test_summary_matches_report(capsys):
    main(["--task", "test", "-n", "12"])
    out = capsys.readouterr().out.splitlines()
    assert out == solve(TaskKind.TEST, 12).summary_lines()


def test_table_output(capsys):
    main(["--task", "test", "-n", "5", "--table"])
    out = capsys.readouterr().out.splitlines()
    report = solve(TaskKind.TEST, 5)
    assert out[-len(report.table_lines()):] == report.table_lines()
    assert out[len(report.summary_lines())] == ""
    assert len(out) == len(report.summary_lines()) + 1 + 5 + 2


def test_plot_option_writes_png(tmp_path, capsys):
    target = tmp_path / "graph.png"
    main(["--task", "main", "-n", "6", "--plot", str(target)])
    capsys.readouterr()
    assert target.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_plot_report_returns_path(tmp_path):
    report = build_report(TaskKind.TEST, [1.0, 2.0, 3.0], [1.0, 2.5, 3.0])
    target = tmp_path / "out.png"
    result = plot_report(report, str(target))
    assert result == target
    assert target.stat().st_size > 0


def test_invalid_intervals_rejected(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["-n", "0"])
    assert excinfo.value.code == 2


def test_non_integer_intervals_rejected(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["-n", "ten"])
    assert excinfo.value.code == 2


def test_unknown_task_rejected(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--task", "other"])
    assert excinfo.value.code == 2