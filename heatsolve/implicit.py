"""Backward (implicit) Euler time stepping for the 1D heat problem."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from scipy import sparse
from scipy.sparse.linalg import factorized

from heatsolve.explicit import _DIFFUSIVITY, _FINAL_TIME, _run_cli, _validate
from heatsolve.problem import LENGTH, grid_points, source_term

_DT = ("--dt", 0.01, "time step")
_OPTIONS = [_DT, _FINAL_TIME, _DIFFUSIVITY]


def laplacian_1d(nx: int, dx: float) -> sparse.csc_matrix:
    """Second-difference operator with identity rows at the two Dirichlet nodes."""
    if nx < 2:
        raise ValueError(f"a grid needs at least 2 points, got {nx}")
    _validate(positive={"grid spacing": dx})
    inv = 1.0 / (dx * dx)
    diagonal = np.full(nx, -2.0 * inv)
    lower = np.full(nx - 1, inv)
    upper = np.full(nx - 1, inv)
    diagonal[[0, -1]] = 1.0
    upper[0] = 0.0
    lower[-1] = 0.0
    return sparse.diags([lower, diagonal, upper], [-1, 0, 1], format="csc")


def _setup(
    nx: int, dt: float, final_time: float, diffusivity: float
) -> tuple[np.ndarray, sparse.csc_matrix, int]:
    """Validate parameters and return grid points, the operator and the step count."""
    _validate(
        positive={"time step": dt, "diffusivity": diffusivity},
        non_negative={"final time": final_time},
    )
    x = grid_points(nx, LENGTH)
    return x, laplacian_1d(nx, LENGTH / (nx - 1)), int(final_time / dt)


def implicit_euler(
    nx: int = 100,
    dt: float = 0.01,
    final_time: float = 0.1,
    diffusivity: float = 1.0,
) -> np.ndarray:
    """Integrate with backward Euler, solving (I - dt*D*A) u_new = u + dt*s each step."""
    x, a, steps = _setup(nx, dt, final_time, diffusivity)
    solve = factorized((sparse.identity(nx, format="csc") - dt * diffusivity * a).tocsc())

    u = np.sin(np.pi * x)
    for step in range(steps):
        rhs = u.copy()
        rhs[1:-1] += dt * source_term(x[1:-1], (step + 1) * dt)
        u = solve(rhs)
    return u


def main(argv: Sequence[str] | None = None) -> int:
    return _run_cli(argv, implicit_euler, "implicit euler", _OPTIONS)