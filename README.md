# heatsolve

These are small finite-difference solvers for the heat equation `u_t = D u_xx + s`. Each one is checked against a manufactured solution.

In one dimension the domain is `[0, 1]`:

- The exact solution is `u(x, t) = exp(-t) sin(pi x)`.
- The source term is `s(x, t) = (pi^2 - 1) exp(-t) sin(pi x)`.
- The Dirichlet boundaries are zero.

Each 1D solver reports the mean absolute (L1) error at the final time.

In two dimensions the domain is the unit square:

- The exact solution is `u(x, y, t) = exp(-t) sin(pi x) sin(pi y)`.
- The source term is `(2 pi^2 D - 1) u`.
- The unknowns are the `nx * ny` interior nodes, numbered row by row with x changing fastest.
- Node `(i, j)` sits at `((i + 1) / (nx + 1), (j + 1) / (ny + 1))`.

The 2D solver uses backward Euler. It writes VTK structured-grid snapshots and prints the L2 error at each one.

## Installation

```
pip install .
```

This installs numpy and scipy. To run the test suite, install with `pip install .[test]` and run `pytest`.

## Command-line use

### heatsolve-explicit

Forward Euler. The time step is `safety * dx^2 / D`. The command takes `int(T / dt)` steps.

| Option | Default |
| --- | --- |
| `--nx` | 100 |
| `--final-time` | 0.1 |
| `--diffusivity` | 1.0 |
| `--safety` | 0.4 |

### heatsolve-implicit

Backward Euler.

| Option | Default |
| --- | --- |
| `--nx` | 100 |
| `--dt` | 0.01 |
| `--final-time` | 0.1 |
| `--diffusivity` | 1.0 |

### heatsolve-cn

Crank-Nicolson. It takes the same options as `heatsolve-implicit`.

### 1D output

Each 1D command prints one line, for example:

```
implicit euler L1 error at t=0.10: ...
```

### heatsolve-implicit2d

2D backward Euler.

| Option | Default |
| --- | --- |
| `--nx` | 10 |
| `--ny` | 10 |
| `--dt` | 0.0001 |
| `--final-time` | 1.0 |
| `--diffusivity` | 1.0 |
| `--snapshots` | 5 |
| `--output-dir` | `.` |

The command takes `int(T / dt)` steps. Every `steps // snapshots` steps it writes `solution_t<step>.vts` into the output directory, with the step number zero-padded to at least three digits. At each snapshot it prints:

```
t = 0.200 | L2 error = ...
```

The output directory is created if it does not exist.

### Invalid parameters

Invalid parameters make every command exit with a usage error. Examples:

- a non-positive time step or diffusivity;
- a negative final time;
- too few steps for the requested number of snapshots.

## Library use

```python
from heatsolve.explicit import explicit_euler
from heatsolve.implicit import implicit_euler, laplacian_1d
from heatsolve.crank_nicolson import crank_nicolson
from heatsolve.problem import exact_solution, source_term, grid_points, l1_error

u = crank_nicolson(nx=100, dt=0.01, final_time=0.1, diffusivity=1.0)
x = grid_points(100)
print(l1_error(u, x, 0.1))
```

The 1D functions in `heatsolve.problem`:

- `grid_points(nx, length)` returns `nx` equally spaced nodes from 0 to `length`.
- `l1_error(u, x, t)` is the mean absolute difference from the exact solution.

The 1D solvers:

- `explicit_euler`, `implicit_euler` and `crank_nicolson` return the solution array at the final time.
- `laplacian_1d(nx, dx)` builds the sparse second-difference operator with identity rows at the two boundary nodes.

The 2D solver:

```python
from heatsolve.implicit2d import simulate, l2_error, build_system_matrix, Snapshot
from heatsolve.vtk import write_structured_grid, format_structured_grid

for snap in simulate(nx=10, ny=10, dt=0.0001, final_time=1.0, diffusivity=1.0, snapshots=5):
    print(snap.step, snap.time, snap.error)
    write_structured_grid(f"solution_t{snap.step:03d}.vts", snap.solution, 10, 10)
```

What the 2D functions do:

- `simulate` checks its parameters when it is called. It returns an iterator of `Snapshot` records. Each record has the fields `step`, `time`, `solution` and `error`.
- `build_system_matrix(nx, ny, dt, diffusivity)` returns the sparse matrix `I - dt*D*Laplacian` for the five-point stencil.
- `l2_error(u, nx, ny, time)` is the discrete L2 error, weighted by the cell area.
- `exact_solution_2d` and `source_term_2d` evaluate the manufactured problem.
- `format_structured_grid` renders a field as the text of an ASCII VTK `.vts` file.
- `write_structured_grid` writes that text to a file.

All functions raise `ValueError` for invalid grid sizes, steps or shapes.

## Limitations

- Everything runs in a single process. There is no distributed or parallel execution.
- The linear systems are solved with a direct sparse factorisation. No choice of iterative solver is offered.