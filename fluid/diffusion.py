"""
Implicit diffusion: each cell relaxes toward its wrapped neighbor average.
    new = (orig + k * avg(work)) / (1 + k),  k = rate * dt
Gauss-Seidel: sweeps run in raster order on a working copy, so later cells see
values already updated in the same sweep. Stable for any dt.
"""

import logging

from fluid.constants import DIFFUSION_RATE, DIFFUSION_SWEEPS
from fluid.grid import SimulationGrid, neighbor_average

logger = logging.getLogger(__name__)


def diffuse(
    grid: SimulationGrid,
    dt: float,
    diffusion_rate: float = DIFFUSION_RATE,
    sweeps: int = DIFFUSION_SWEEPS,
    legacy_cross_term: bool = False,
) -> SimulationGrid:
    """
    One diffusion step on all three channels; working copy swapped in at the end.
    legacy_cross_term=True reproduces the old update that seeded velocity.x from the
    original velocity.y instead of velocity.x.
    """
    if dt < 0 or diffusion_rate < 0:
        raise ValueError(
            f"dt and diffusion_rate must be non-negative, got dt={dt}, rate={diffusion_rate}"
        )
    k = diffusion_rate * dt
    orig_d, orig_vx, orig_vy = grid.density, grid.velocity_x, grid.velocity_y
    orig_x_source = orig_vy if legacy_cross_term else orig_vx
    d, vx, vy = orig_d.copy(), orig_vx.copy(), orig_vy.copy()
    height, width = grid.shape
    denom = 1.0 + k
    for _ in range(sweeps):
        for y in range(height):
            for x in range(width):
                d[y, x] = (orig_d[y, x] + k * neighbor_average(d, x, y)) / denom
                vx[y, x] = (orig_x_source[y, x] + k * neighbor_average(vx, x, y)) / denom
                vy[y, x] = (orig_vy[y, x] + k * neighbor_average(vy, x, y)) / denom
    grid.density, grid.velocity_x, grid.velocity_y = d, vx, vy
    logger.debug("diffuse: k=%.4f sweeps=%d total_density=%.6f", k, sweeps, grid.total_density())
    return grid
