"""Backward Euler for the 2D heat equation on the unit square with Dirichlet walls.

Unknowns live on the nx * ny interior nodes, ordered row-major with x fastest.
The manufactured solution is exp(-t) sin(pi x) sin(pi y).
"""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from numpy.typing import ArrayLike
from scipy import sparse
from scipy.sparse.linalg import factorized

from heatsolve.vtk import write_structured_grid


@dataclass(frozen=True)
class Snapshot:
    """Solution state recorded at an output step."""

    step: int
    time: float
    solution: np.ndarray
    error: float


def exact_solution_2d(x: ArrayLike, y: ArrayLike, t: float) -> np.ndarray | float:
    """Exact solution exp(-t) * sin(pi x) * sin(pi y)."""
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    return np.exp(-t) * np.sin(math.pi * x) * np.sin(math.pi * y)


def source_term_2d(
    x: ArrayLike, y: ArrayLike, t: float, diffusivity: float = 1.0
) -> np.ndarray | float:
    """Source (2 pi^2 D - 1) * u_exact that drives the exact solution."""
    return (-1.0 + 2.0 * math.pi**2 * diffusivity) * exact_solution_2d(x, y, t)


def _check_grid(nx: int, ny: int) -> None:
    if nx < 1 or ny < 1:
        raise ValueError(f"grid dimensions must be positive, got {nx} x {ny}")


def _second_difference(n: int) -> sparse.csr_matrix:
    if n == 1:
        return sparse.csr_matrix(np.array([[2.0]]))
    off = np.full(n - 1, -1.0)
    return sparse.diags([off, np.full(n, 2.0), off], [-1, 0, 1], format="csr")


def _node_coordinates(nx: int, ny: int) -> tuple[np.ndarray, np.ndarray]:
    xs = np.arange(1, nx + 1) / (nx + 1)
    ys = np.arange(1, ny + 1) / (ny + 1)
    x, y = np.meshgrid(xs, ys, indexing="xy")
    return x.ravel(), y.ravel()


def build_system_matrix(
    nx: int, ny: int, dt: float, diffusivity: float = 1.0
) -> sparse.csc_matrix:
    """Matrix I - dt*D*Laplacian for the five-point stencil on interior nodes."""
    _check_grid(nx, ny)
    if dt <= 0:
        raise ValueError(f"time step must be positive, got {dt}")
    if diffusivity <= 0:
        raise ValueError(f"diffusivity must be positive, got {diffusivity}")
    dx = 1.0 / (nx + 1)
    dy = 1.0 / (ny + 1)
    negative_laplacian = (
        sparse.kron(sparse.identity(ny), _second_difference(nx)) / (dx * dx)
        + sparse.kron(_second_difference(ny), sparse.identity(nx)) / (dy * dy)
    )
    return (sparse.identity(nx * ny) + dt * diffusivity * negative_laplacian).tocsc()


def l2_error(u: ArrayLike, nx: int, ny: int, time: float) -> float:
    """Discrete L2 norm of ``u`` minus the exact solution, weighted by the cell area."""
    _check_grid(nx, ny)
    values = np.real(np.asarray(u)).astype(float).ravel()
    if values.size != nx * ny:
        raise ValueError(f"expected {nx * ny} values for a {nx} x {ny} grid, got {values.size}")
    x, y = _node_coordinates(nx, ny)
    diff = values - exact_solution_2d(x, y, time)
    return math.sqrt(float(np.sum(diff * diff)) / ((nx + 1) * (ny + 1)))


def simulate(
    nx: int = 10,
    ny: int = 10,
    dt: float = 0.0001,
    final_time: float = 1.0,
    diffusivity: float = 1.0,
    snapshots: int = 5,
) -> Iterator[Snapshot]:
    """Run ``int(final_time / dt)`` backward Euler steps, yielding a snapshot
    every ``steps // snapshots`` steps."""
    if final_time < 0:
        raise ValueError(f"final time must not be negative, got {final_time}")
    if snapshots < 1:
        raise ValueError(f"number of snapshots must be positive, got {snapshots}")
    matrix = build_system_matrix(nx, ny, dt, diffusivity)
    steps = int(final_time / dt)
    interval = steps // snapshots
    if interval == 0:
        raise ValueError(
            f"{steps} steps are too few for {snapshots} snapshots; "
            "lower dt or the snapshot count"
        )
    return _run(matrix, nx, ny, dt, diffusivity, steps, interval)


def _run(
    matrix: sparse.csc_matrix,
    nx: int,
    ny: int,
    dt: float,
    diffusivity: float,
    steps: int,
    interval: int,
) -> Iterator[Snapshot]:
    solve = factorized(matrix)
    x, y = _node_coordinates(nx, ny)
    u = exact_solution_2d(x, y, 0.0)
    for step in range(1, steps + 1):
        t = step * dt
        u = solve(u + dt * source_term_2d(x, y, t, diffusivity))
        if step % interval == 0:
            yield Snapshot(step, t, u.copy(), l2_error(u, nx, ny, t))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Implicit Euler solver for the 2D heat equation.")
    parser.add_argument("--nx", type=int, default=10, help="interior nodes along x")
    parser.add_argument("--ny", type=int, default=10, help="interior nodes along y")
    parser.add_argument("--dt", type=float, default=0.0001, help="time step")
    parser.add_argument("--final-time", type=float, default=1.0, help="end time")
    parser.add_argument("--diffusivity", type=float, default=1.0, help="diffusion coefficient")
    parser.add_argument("--snapshots", type=int, default=5, help="number of outputs")
    parser.add_argument("--output-dir", type=Path, default=Path("."), help="where to write files")
    args = parser.parse_args(argv)

    try:
        run = simulate(args.nx, args.ny, args.dt, args.final_time, args.diffusivity, args.snapshots)
    except ValueError as exc:
        parser.error(str(exc))
    args.output_dir.mkdir(parents=True, exist_ok=True)
    for snap in run:
        path = args.output_dir / f"solution_t{snap.step:03d}.vts"
        write_structured_grid(path, snap.solution, args.nx, args.ny)
        print(f"t = {snap.time:.3f} | L2 error = {snap.error:.6e}")
    return 0