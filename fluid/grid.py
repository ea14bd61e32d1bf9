"""2D toroidal grid of cells: velocity (x, y) and density. Arrays shaped (height, width), indexed [y, x]."""

import logging
import math
from typing import NamedTuple

import numpy as np

from fluid.constants import (
    DEFAULT_HEIGHT,
    DEFAULT_INIT_MODE,
    DEFAULT_WIDTH,
    INIT_MODES,
    NEIGHBOR_OFFSETS,
    RANDOM_SPEED_RANGE,
    SPIKE_CELL,
    SPIKE_DENSITY,
    SPIKE_VELOCITY,
    Field,
)

logger = logging.getLogger(__name__)


class Cell(NamedTuple):
    """Snapshot of one cell. Copy, not a view into the grid."""

    velocity: tuple[float, float]
    density: float

    @property
    def speed(self) -> float:
        """Velocity magnitude. Callers must check it before taking an angle."""
        return math.hypot(self.velocity[0], self.velocity[1])


def neighbor_average(arr: np.ndarray, x: int, y: int) -> float:
    """Mean of the 4 wrapped von-Neumann neighbors of (x, y); centre excluded."""
    height, width = arr.shape
    total = 0.0
    for dx, dy in NEIGHBOR_OFFSETS:
        total += arr[(y + dy) % height, (x + dx) % width]
    return float(total / 4.0)


class SimulationGrid:
    """Velocity and density per cell; dimensions fixed for the grid's lifetime."""

    __slots__ = ("shape", "mode", "density", "velocity_x", "velocity_y", "_rng")

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        mode: str = DEFAULT_INIT_MODE,
        rng: np.random.Generator | None = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        if mode not in INIT_MODES:
            raise ValueError(f"unknown init mode {mode!r}; expected one of {INIT_MODES}")
        self.shape = (height, width)
        self.mode = mode
        self._rng = rng
        self._populate()
        logger.info("Created %dx%d grid (mode=%s)", width, height, mode)

    @property
    def width(self) -> int:
        return self.shape[1]

    @property
    def height(self) -> int:
        return self.shape[0]

    def _populate(self) -> None:
        """Fresh arrays: all zero, then the construction mode applied."""
        self.density = np.zeros(self.shape, dtype=np.float64)
        self.velocity_x = np.zeros(self.shape, dtype=np.float64)
        self.velocity_y = np.zeros(self.shape, dtype=np.float64)
        if self.mode == "spike":
            x, y = self.spike_cell()
            self.velocity_x[y, x], self.velocity_y[y, x] = SPIKE_VELOCITY
            self.density[y, x] = SPIKE_DENSITY
        elif self.mode == "random":
            if self._rng is None:
                self._rng = np.random.default_rng()
            lo, hi = RANDOM_SPEED_RANGE
            speed = self._rng.uniform(lo, hi, self.shape)
            angle = self._rng.uniform(0.0, 2.0 * np.pi, self.shape)
            self.velocity_x = speed * np.cos(angle)
            self.velocity_y = speed * np.sin(angle)
            self.density = self._rng.random(self.shape)

    def spike_cell(self) -> tuple[int, int]:
        """SPIKE_CELL when it fits, else the centre cell."""
        x, y = SPIKE_CELL
        if self.contains(x, y):
            return x, y
        return self.width // 2, self.height // 2

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x: int, y: int) -> None:
        # Direct access never wraps; only the stencil does.
        if not self.contains(x, y):
            raise ValueError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")

    def channel(self, field: Field) -> np.ndarray:
        if field == Field.DENSITY:
            return self.density
        if field == Field.VELOCITY_X:
            return self.velocity_x
        if field == Field.VELOCITY_Y:
            return self.velocity_y
        raise ValueError(f"unknown field {field!r}")

    def average(self, x: int, y: int, field: Field) -> float:
        self._check_bounds(x, y)
        return neighbor_average(self.channel(field), x, y)

    def read(self, x: int, y: int) -> Cell:
        self._check_bounds(x, y)
        return Cell(
            velocity=(float(self.velocity_x[y, x]), float(self.velocity_y[y, x])),
            density=float(self.density[y, x]),
        )

    def inject(
        self,
        x: int,
        y: int,
        velocity: tuple[float, float],
        density: float | None = None,
    ) -> None:
        """Overwrite one cell's velocity (and density if given). Call between steps only."""
        self._check_bounds(x, y)
        self.velocity_x[y, x], self.velocity_y[y, x] = velocity
        if density is not None:
            self.density[y, x] = density
        logger.debug("Injected velocity %s at (%d, %d)", velocity, x, y)

    def reset(self) -> None:
        """Replace every cell with a freshly constructed one; same size and mode."""
        self._populate()
        logger.info("Reset %dx%d grid (mode=%s)", self.width, self.height, self.mode)

    def total_density(self) -> float:
        return float(np.sum(self.density))
