[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heatsolve"
version = "0.1.0"
description = "Finite-difference solvers for the heat equation checked against manufactured solutions: explicit, implicit and Crank-Nicolson in 1D, backward Euler in 2D with VTK output."
requires-python = ">=3.10"
keywords = ["heat equation", "diffusion", "finite differences", "crank-nicolson", "backward euler", "vtk"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
heatsolve-explicit = "heatsolve.explicit:main"
heatsolve-implicit = "heatsolve.implicit:main"
heatsolve-cn = "heatsolve.crank_nicolson:main"
heatsolve-implicit2d = "heatsolve.implicit2d:main"

[tool.hatch.build.targets.wheel]
packages = ["heatsolve"]

[tool.pytest.ini_options]
addopts = "-ra"
