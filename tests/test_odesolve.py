import math
from unittest import mock

import pytest

from numlab.odesolve import (
    OdePoint,
    OdeSetup,
    adams_bashforth,
    euler,
    euler_step,
    get_dx,
    main,
    main_fn,
    precise,
    run_gnuplot,
    write_points,
)


def _reader(lines):
    it = iter(lines)
    return lambda: next(it)


def test_main_fn_and_euler_step():
    assert main_fn(2.0, 3.0) == 5.0
    assert euler_step(1.0, 2.0, 0.5) == 2.0


def test_setup_counts_points():
    setup = OdeSetup.from_bounds(0.0, 1.0, 0.0, 1.0, 0.25)
    assert setup.n == 5
    assert setup.f == main_fn(0.0, 1.0)


def test_setup_rejects_zero_step():
    with pytest.raises(ValueError):
        OdeSetup.from_bounds(0.0, 1.0, 0.0, 1.0, 0.0)


def test_setup_rejects_too_few_points():
    with pytest.raises(ValueError):
        OdeSetup.from_bounds(0.0, 1.0, 0.0, 1.0, -2.0)


def test_euler_points_follow_steps():
    setup = OdeSetup.from_bounds(0.0, 1.0, 0.0, 1.0, 0.25)
    points = euler(setup)
    assert len(points) == setup.n
    assert points[0] == OdePoint(0.0, 1.0, 1.0)
    for prev, cur in zip(points, points[1:]):
        assert cur.x == pytest.approx(prev.x + setup.dx)
        assert cur.y == pytest.approx(euler_step(prev.y, prev.f, setup.dx))
        assert cur.f == main_fn(cur.x, cur.y)


def test_adams_bashforth_starts_like_euler():
    setup = OdeSetup.from_bounds(0.0, 1.0, 0.0, 1.0, 0.1)
    abm = adams_bashforth(setup)
    em = euler(setup)
    assert len(abm) == setup.n
    assert abm[:2] == em[:2]


def test_precise_matches_analytic_constant():
    setup = OdeSetup.from_bounds(0.0, 2.0, 0.5, 1.0, 0.2)
    points = precise(setup)
    constant = (0.5 + 1.0 + 1) / math.exp(0.5)
    assert points[0].y == 1.0
    for p in points:
        assert (p.y + p.x + 1) / math.exp(p.x) == pytest.approx(constant)


def test_adams_bashforth_more_accurate_than_euler():
    setup = OdeSetup.from_bounds(0.0, 1.0, 0.0, 1.0, 0.01)
    exact = precise(setup)[-1].y
    abm_error = abs(adams_bashforth(setup)[-1].y - exact)
    em_error = abs(euler(setup)[-1].y - exact)
    assert abm_error < em_error
    assert euler(setup)[-1].y < exact


def test_write_points_format(tmp_path):
    target = tmp_path / "out.plt"
    write_points([OdePoint(0.0, 1.0, 1.0), OdePoint(0.5, 2.25, 2.75)], target)
    assert target.read_text() == "0.0000 1.0000\n0.5000 2.2500\n"


def test_write_points_missing_directory(tmp_path):
    with pytest.raises(OSError):
        write_points([OdePoint(0.0, 1.0, 1.0)], tmp_path / "nope" / "out.plt")


def test_get_dx_reprompts():
    out = []
    dx = get_dx(1.0, _reader(["0", "5", "0.5"]), out.append)
    assert dx == 0.5
    text = "".join(out)
    assert "dx can't be zero." in text
    assert "5 greater then 1" in text
    assert text.count("Please re-enter dx.") == 2


def test_run_gnuplot_returns_status():
    with mock.patch("numlab.odesolve.subprocess.run") as run:
        run.return_value.returncode = 3
        assert run_gnuplot("plot.plt") == 3
        assert run.call_args[0][0] == ["gnuplot", "plot.plt"]


def test_run_gnuplot_missing_program():
    with mock.patch("numlab.odesolve.subprocess.run", side_effect=FileNotFoundError):
        assert run_gnuplot() == 127


def test_main_writes_three_files(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    answers = iter(["1", "0", "2", "0", "1", "0.25"])
    monkeypatch.setattr("builtins.input", lambda: next(answers))
    with mock.patch("numlab.odesolve.subprocess.run") as run:
        run.return_value.returncode = 0
        assert main([]) == 0
    out = capsys.readouterr().out
    assert "Bounds will be replaced." in out
    assert "not in range [0, 1]" in out
    for name in ("adams_bashforth.plt", "euler.plt", "presice.plt"):
        lines = (tmp_path / name).read_text().splitlines()
        assert len(lines) == 5
        assert lines[0] == "0.0000 1.0000"