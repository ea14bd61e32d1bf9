"""Per-frame update: optional test pattern, then diffusion, then advection."""

import logging

import numpy as np

from fluid.advection import advect
from fluid.constants import ADVECTION_STEPS, DIFFUSION_RATE, DIFFUSION_SWEEPS
from fluid.diffusion import diffuse
from fluid.grid import SimulationGrid

logger = logging.getLogger(__name__)


def oscillate(grid: SimulationGrid, dt: float, elapsed: float) -> SimulationGrid:
    """
    Debug pattern, overwrites state deterministically from elapsed time:
    density cycles through [0, 1) at one unit per second; each velocity keeps its
    length and is turned to angle sin(elapsed) radians.
    """
    grid.density = np.mod(grid.density + dt, 1.0)
    speed = np.hypot(grid.velocity_x, grid.velocity_y)
    angle = np.sin(elapsed)
    grid.velocity_x = speed * np.cos(angle)
    grid.velocity_y = speed * np.sin(angle)
    return grid


def step(
    grid: SimulationGrid,
    dt: float,
    diffusion_rate: float = DIFFUSION_RATE,
    diffusion_sweeps: int = DIFFUSION_SWEEPS,
    advection_steps: int = ADVECTION_STEPS,
    *,
    test_pattern: bool = False,
    elapsed: float = 0.0,
) -> SimulationGrid:
    """One frame. The caller owns grid and must not inject while this runs."""
    if dt < 0:
        raise ValueError(f"dt must be non-negative, got {dt}")
    if test_pattern:
        oscillate(grid, dt, elapsed)
    diffuse(grid, dt, diffusion_rate, sweeps=diffusion_sweeps)
    advect(grid, dt, steps=advection_steps)
    return grid
