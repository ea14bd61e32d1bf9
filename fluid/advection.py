"""
Semi-Lagrangian advection of density. For each cell, trace back along its velocity
one timestep, f = (x, y) - v * dt, and sample density there by bilinear
interpolation over the wrapped 2x2 lattice around floor(f). Velocity is not advected.
"""

import logging
import math

import numpy as np

from fluid.constants import ADVECTION_STEPS
from fluid.grid import SimulationGrid

logger = logging.getLogger(__name__)


def lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def sample_density(
    density: np.ndarray, fx: float, fy: float, symmetric: bool = False
) -> float:
    """Bilinear sample at continuous (fx, fy). Floor first, then wrap, so negative f is safe.

    The default lattice pairs the lower row as (ix, iy+1) -> (ix, iy), the orientation
    the simulation was tuned with. symmetric=True uses (ix, iy+1) -> (ix+1, iy+1).
    """
    height, width = density.shape
    fx0, fy0 = math.floor(fx), math.floor(fy)
    jx, jy = fx - fx0, fy - fy0
    ix, iy = fx0 % width, fy0 % height
    ix1, iy1 = (ix + 1) % width, (iy + 1) % height
    z1 = lerp(density[iy, ix], density[iy, ix1], jx)
    if symmetric:
        z2 = lerp(density[iy1, ix], density[iy1, ix1], jx)
    else:
        z2 = lerp(density[iy1, ix], density[iy, ix], jx)
    return float(lerp(z1, z2, jy))


def advect(
    grid: SimulationGrid,
    dt: float,
    steps: int = ADVECTION_STEPS,
    symmetric: bool = False,
) -> SimulationGrid:
    """Transport density `steps` times; each sub-step samples the previous sub-step's field."""
    if dt < 0:
        raise ValueError(f"dt must be non-negative, got {dt}")
    height, width = grid.shape
    vx, vy = grid.velocity_x, grid.velocity_y
    work = grid.density.copy()
    for _ in range(steps):
        src = work
        work = np.empty_like(src)
        for y in range(height):
            for x in range(width):
                fx = x - vx[y, x] * dt
                fy = y - vy[y, x] * dt
                work[y, x] = sample_density(src, fx, fy, symmetric)
    grid.density = work
    logger.debug("advect: dt=%.4f steps=%d total_density=%.6f", dt, steps, grid.total_density())
    return grid
