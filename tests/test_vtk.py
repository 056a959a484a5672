import xml.etree.ElementTree as ET

import numpy as np
import pytest

from heatsolve.vtk import format_structured_grid, write_structured_grid


def _parse(text):
    root = ET.fromstring(text)
    arrays = root.findall(".//DataArray")
    points = np.array(arrays[0].text.split(), dtype=float).reshape(-1, 3)
    values = np.array(arrays[1].text.split(), dtype=float)
    return root, points, values


def test_header_lines_fixed_by_format():
    lines = format_structured_grid(np.zeros(6), 3, 2).splitlines()
    assert lines[0] == '<?xml version="1.0"?>'
    assert lines[1] == '<VTKFile type="StructuredGrid" version="0.1" byte_order="LittleEndian">'
    assert lines[-1] == "</VTKFile>"


def test_extent_matches_grid():
    root, _, _ = _parse(format_structured_grid(np.zeros(12), 4, 3))
    grid = root.find("StructuredGrid")
    assert grid.get("WholeExtent") == "0 3 0 2 0 0"
    assert grid.find("Piece").get("Extent") == grid.get("WholeExtent")


def test_points_are_interior_nodes_with_x_fastest():
    nx, ny = 4, 3
    _, points, _ = _parse(format_structured_grid(np.zeros(nx * ny), nx, ny))
    assert points.shape == (nx * ny, 3)
    assert np.all(points[:, 2] == 0.0)
    assert np.all((points[:, :2] > 0.0) & (points[:, :2] < 1.0))
    # x varies within a row, y stays fixed
    assert np.all(np.diff(points[:nx, 0]) > 0)
    assert np.all(points[:nx, 1] == points[0, 1])
    assert points[nx, 1] > points[0, 1]


def test_values_round_trip_to_six_decimals():
    rng = np.random.default_rng(7)
    values = rng.uniform(-1.0, 1.0, size=15)
    _, _, parsed = _parse(format_structured_grid(values, 5, 3))
    assert np.allclose(parsed, values, atol=5e-7)


def test_two_dimensional_input_is_flattened_row_major():
    grid = np.arange(6, dtype=float).reshape(2, 3)
    _, _, parsed = _parse(format_structured_grid(grid, 3, 2))
    assert parsed.tolist() == grid.ravel().tolist()


def test_write_matches_format(tmp_path):
    values = np.linspace(0.0, 1.0, 9)
    path = tmp_path / "out.vts"
    write_structured_grid(path, values, 3, 3)
    assert path.read_text(encoding="ascii") == format_structured_grid(values, 3, 3)


def test_wrong_number_of_values_rejected():
    with pytest.raises(ValueError):
        format_structured_grid(np.zeros(5), 3, 2)


@pytest.mark.parametrize("nx, ny", [(0, 2), (2, 0), (-1, 3)])
def test_non_positive_dimensions_rejected(nx, ny):
    with pytest.raises(ValueError):
        format_structured_grid(np.zeros(0), nx, ny)