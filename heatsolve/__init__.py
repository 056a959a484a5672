"""Finite-difference heat-equation solvers (1D explicit, implicit, Crank-Nicolson; 2D implicit) with manufactured-solution error checks and VTK output."""

__version__ = "0.1.0"