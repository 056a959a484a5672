"""Forward (explicit) Euler time stepping for the 1D heat problem."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable, Mapping, Sequence

import numpy as np

from heatsolve.problem import LENGTH, grid_points, l1_error, source_term

_Option = tuple[str, float, str]

_FINAL_TIME: _Option = ("--final-time", 0.1, "end time")
_DIFFUSIVITY: _Option = ("--diffusivity", 1.0, "diffusion coefficient")


def _validate(
    positive: Mapping[str, float] | None = None,
    non_negative: Mapping[str, float] | None = None,
) -> None:
    """Raise ValueError for the first parameter outside its allowed range."""
    for name, value in (positive or {}).items():
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")
    for name, value in (non_negative or {}).items():
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")


def _run_cli(
    argv: Sequence[str] | None,
    solver: Callable[..., np.ndarray],
    label: str,
    options: Iterable[_Option],
) -> int:
    """Parse solver options, run the solver and print its L1 error."""
    parser = argparse.ArgumentParser(description=f"{label} solver for the 1D heat equation.")
    parser.add_argument("--nx", type=int, default=100, help="number of grid points")
    for flag, default, text in options:
        parser.add_argument(flag, type=float, default=default, help=text)
    args = parser.parse_args(argv)

    try:
        u = solver(**vars(args))
    except ValueError as exc:
        parser.error(str(exc))
    error = l1_error(u, grid_points(args.nx, LENGTH), args.final_time)
    print(f"{label} L1 error at t={args.final_time:.2f}: {error:.6e}")
    return 0


def explicit_euler(
    nx: int = 100,
    final_time: float = 0.1,
    diffusivity: float = 1.0,
    safety: float = 0.4,
) -> np.ndarray:
    """Integrate with forward Euler and return the solution on the grid.

    The step is ``safety * dx**2 / diffusivity`` and ``int(final_time / dt)``
    steps are taken. Points beyond the domain are treated as zero and both
    boundary nodes are reset to zero after every step.
    """
    _validate(
        positive={"diffusivity": diffusivity, "safety factor": safety},
        non_negative={"final time": final_time},
    )

    x = grid_points(nx, LENGTH)
    dx = LENGTH / (nx - 1)
    dt = safety * dx * dx / diffusivity
    steps = int(final_time / dt)

    u = np.sin(np.pi * x)
    for step in range(steps):
        padded = np.pad(u, 1)
        laplacian = (padded[:-2] - 2.0 * u + padded[2:]) / (dx * dx)
        u = u + dt * (diffusivity * laplacian + source_term(x, step * dt))
        u[[0, -1]] = 0.0
    return u


def main(argv: Sequence[str] | None = None) -> int:
    return _run_cli(
        argv,
        explicit_euler,
        "explicit euler",
        [_FINAL_TIME, _DIFFUSIVITY, ("--safety", 0.4, "dt as a fraction of dx^2/D")],
    )