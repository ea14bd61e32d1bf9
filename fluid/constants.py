"""Simulation constants. Grid is a torus; every cell has 4 wrapped neighbors."""

import enum

DEFAULT_WIDTH, DEFAULT_HEIGHT = 10, 10
# k = DIFFUSION_RATE * dt
DIFFUSION_RATE = 15.0
DIFFUSION_SWEEPS = 5
ADVECTION_STEPS = 5

INIT_MODES = ("zero", "spike", "random")
DEFAULT_INIT_MODE = "spike"
SPIKE_CELL = (4, 4)
SPIKE_VELOCITY = (20.0, 20.0)
SPIKE_DENSITY = 1.0
# Random mode: speed uniform in [lo, hi), angle uniform in [0, 2pi)
RANDOM_SPEED_RANGE = (0.5, 3.0)

# Neighbor offsets (dx, dy): west, east, north, south.
NEIGHBOR_OFFSETS = [(-1, 0), (1, 0), (0, -1), (0, 1)]


class Field(enum.IntEnum):
    """Scalar channel of a cell sampled by the averaging stencil."""

    DENSITY = 0
    VELOCITY_X = 1
    VELOCITY_Y = 2
