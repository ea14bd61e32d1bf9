"""Fluid: toroidal grid, diffusion and advection steps."""

from fluid.grid import Cell, SimulationGrid
from fluid.diffusion import diffuse
from fluid.advection import advect
from fluid.simulation import oscillate, step
from fluid.constants import DEFAULT_WIDTH, DEFAULT_HEIGHT, DIFFUSION_RATE, Field

__all__ = [
    "Cell", "SimulationGrid", "Field", "diffuse", "advect", "oscillate", "step",
    "DEFAULT_WIDTH", "DEFAULT_HEIGHT", "DIFFUSION_RATE",
]
