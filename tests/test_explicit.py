import re

import numpy as np
import pytest

from heatsolve.explicit import explicit_euler, main
from heatsolve.problem import grid_points, l1_error


def _error(u, nx=100):
    return l1_error(u, grid_points(nx), 0.1)


def test_default_run_is_accurate():
    u = explicit_euler()
    assert u.shape == (100,)
    assert _error(u) < 1e-3


def test_boundaries_are_zero():
    u = explicit_euler(nx=30)
    assert (u[0], u[-1]) == (0.0, 0.0)


def test_refinement_reduces_error():
    assert _error(explicit_euler(nx=100)) < _error(explicit_euler(nx=25), 25)


def test_zero_final_time_returns_initial_profile():
    u = explicit_euler(nx=20, final_time=0.0)
    assert np.allclose(u, np.sin(np.pi * grid_points(20)))


def test_unstable_step_blows_up():
    stable_error = _error(explicit_euler())
    with np.errstate(all="ignore"):
        unstable_error = float(np.nan_to_num(_error(explicit_euler(safety=0.6)), nan=np.inf))
    assert unstable_error > 1.0
    assert unstable_error > 1000.0 * stable_error


@pytest.mark.parametrize(
    "kwargs",
    [{"safety": 0.0}, {"diffusivity": -1.0}, {"final_time": -0.1}, {"nx": 1}],
)
def test_invalid_parameters_rejected(kwargs):
    with pytest.raises(ValueError):
        explicit_euler(**kwargs)


def test_main_prints_error_line(capsys):
    assert main(["--nx", "20"]) == 0
    out = capsys.readouterr().out
    assert re.fullmatch(r"explicit euler L1 error at t=0\.10: \d\.\d{6}e[+-]\d{2}\n", out)