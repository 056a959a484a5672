"""Writing 2D nodal fields as ASCII VTK structured-grid files."""

from __future__ import annotations

import os
from collections.abc import Iterator

import numpy as np
from numpy.typing import ArrayLike


def _check(values: np.ndarray, nx: int, ny: int) -> None:
    if nx < 1 or ny < 1:
        raise ValueError(f"grid dimensions must be positive, got {nx} x {ny}")
    if values.size != nx * ny:
        raise ValueError(f"expected {nx * ny} values for a {nx} x {ny} grid, got {values.size}")


def _lines(values: np.ndarray, nx: int, ny: int) -> Iterator[str]:
    yield '<?xml version="1.0"?>'
    yield '<VTKFile type="StructuredGrid" version="0.1" byte_order="LittleEndian">'
    yield f'  <StructuredGrid WholeExtent="0 {nx - 1} 0 {ny - 1} 0 0">'
    yield f'    <Piece Extent="0 {nx - 1} 0 {ny - 1} 0 0">'
    yield "      <Points>"
    yield '        <DataArray type="Float32" NumberOfComponents="3" format="ascii">'
    for j in range(ny):
        y = (j + 1.0) / (ny + 1)
        for i in range(nx):
            x = (i + 1.0) / (nx + 1)
            yield f"          {x:.6f} {y:.6f} 0.0"
    yield "        </DataArray>"
    yield "      </Points>"
    yield '      <PointData Scalars="u">'
    yield '        <DataArray type="Float32" Name="u" format="ascii">'
    for value in values:
        yield f"          {value:.6f}"
    yield "        </DataArray>"
    yield "      </PointData>"
    yield "    </Piece>"
    yield "  </StructuredGrid>"
    yield "</VTKFile>"


def format_structured_grid(values: ArrayLike, nx: int, ny: int) -> str:
    """Render ``values`` (row-major, x fastest) on the interior nodes of the unit square.

    Node (i, j) sits at ((i + 1) / (nx + 1), (j + 1) / (ny + 1)).
    """
    data = np.real(np.asarray(values)).astype(float).ravel()
    _check(data, nx, ny)
    return "".join(f"{line}\n" for line in _lines(data, nx, ny))


def write_structured_grid(
    path: str | os.PathLike[str], values: ArrayLike, nx: int, ny: int
) -> None:
    """Write ``values`` as a VTK structured-grid file at ``path``."""
    text = format_structured_grid(values, nx, ny)
    with open(path, "w", encoding="ascii") as handle:
        handle.write(text)