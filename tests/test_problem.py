import math

import numpy as np
import pytest

from heatsolve.problem import (
    LENGTH,
    exact_solution,
    grid_points,
    l1_error,
    source_term,
)


def test_exact_solution_initial_profile_peak():
    assert exact_solution(0.5, 0.0) == pytest.approx(1.0)


def test_exact_solution_vanishes_on_boundary():
    values = exact_solution(np.array([0.0, 1.0]), 0.3)
    assert values == pytest.approx([0.0, 0.0], abs=1e-15)


def test_exact_solution_decays_in_time():
    x = np.linspace(0.1, 0.9, 9)
    ratio = exact_solution(x, 0.7) / exact_solution(x, 0.2)
    assert np.allclose(ratio, math.exp(-0.5))


def test_source_term_satisfies_heat_equation():
    x = np.linspace(0.05, 0.95, 19)
    t = 0.4
    h = 1e-4
    u_t = (exact_solution(x, t + h) - exact_solution(x, t - h)) / (2 * h)
    u_xx = (exact_solution(x + h, t) - 2 * exact_solution(x, t) + exact_solution(x - h, t)) / h**2
    residual = u_t - u_xx - source_term(x, t)
    assert np.max(np.abs(residual)) < 1e-5


def test_grid_points_endpoints_and_count():
    x = grid_points(100)
    assert len(x) == 100
    assert x[0] == 0.0
    assert x[-1] == pytest.approx(LENGTH)


def test_grid_points_uniform_spacing():
    x = grid_points(11, 2.0)
    assert np.allclose(np.diff(x), x[1] - x[0])
    assert x[-1] == pytest.approx(2.0)


@pytest.mark.parametrize("nx", [0, 1])
def test_grid_points_rejects_too_few(nx):
    with pytest.raises(ValueError):
        grid_points(nx)


def test_grid_points_rejects_nonpositive_length():
    with pytest.raises(ValueError):
        grid_points(10, 0.0)


def test_l1_error_of_exact_solution_is_zero():
    x = grid_points(50)
    assert l1_error(exact_solution(x, 0.1), x, 0.1) == pytest.approx(0.0, abs=1e-15)


def test_l1_error_of_constant_offset():
    x = grid_points(40)
    u = exact_solution(x, 0.2) + 0.25
    assert l1_error(u, x, 0.2) == pytest.approx(0.25)


def test_l1_error_rejects_shape_mismatch():
    with pytest.raises(ValueError):
        l1_error(np.zeros(5), grid_points(6), 0.0)