"""Manufactured test problem for the 1D heat equation u_t = D u_xx + s on [0, 1].

The exact solution is u(x, t) = exp(-t) sin(pi x), with homogeneous Dirichlet
boundaries and the matching source term for D = 1.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike

LENGTH = 1.0


def exact_solution(x: ArrayLike, t: float) -> np.ndarray | float:
    """Exact solution exp(-t) * sin(pi * x)."""
    return np.exp(-t) * np.sin(math.pi * np.asarray(x, dtype=float))


def source_term(x: ArrayLike, t: float) -> np.ndarray | float:
    """Source term (pi^2 - 1) * exp(-t) * sin(pi * x) that drives the exact solution."""
    return (math.pi**2 - 1.0) * np.exp(-t) * np.sin(math.pi * np.asarray(x, dtype=float))


def grid_points(nx: int, length: float = LENGTH) -> np.ndarray:
    """Return ``nx`` equally spaced nodes from 0 to ``length`` inclusive."""
    if nx < 2:
        raise ValueError(f"a grid needs at least 2 points, got {nx}")
    if length <= 0:
        raise ValueError(f"domain length must be positive, got {length}")
    dx = length / (nx - 1)
    return np.arange(nx) * dx


def l1_error(u: ArrayLike, x: ArrayLike, t: float) -> float:
    """Mean absolute deviation of ``u`` from the exact solution at time ``t``."""
    u = np.asarray(u, dtype=float)
    x = np.asarray(x, dtype=float)
    if u.shape != x.shape:
        raise ValueError(f"solution shape {u.shape} does not match grid shape {x.shape}")
    if u.size == 0:
        raise ValueError("cannot measure the error of an empty solution")
    return float(np.sum(np.abs(u - exact_solution(x, t))) / u.size)