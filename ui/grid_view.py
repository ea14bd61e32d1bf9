"""Grid panel: density squares with a velocity arrow per cell, thin grey border."""

import math

import numpy as np
import pygame

from fluid.grid import SimulationGrid
from ui.colors import density_to_rgb, speed_to_rgb

BORDER_COLOR = (80, 80, 80)
BORDER_PX = 1
# Arrow outline pointing along +x, in units where the full arrow is 16 long.
ARROW_SHAPE = [
    (16.0, 0.0), (10.0, -3.0), (10.0, -1.0), (0.0, -1.0),
    (0.0, 1.0), (10.0, 1.0), (10.0, 3.0),
]
ARROW_LENGTH = 16.0
ARROW_CELL_FRACTION = 0.45
MIN_ARROW_SPEED = 1e-9


def cell_size(rect: pygame.Rect, grid: SimulationGrid) -> tuple[int, int]:
    return max(1, rect.width // grid.width), max(1, rect.height // grid.height)


def cell_at(rect: pygame.Rect, grid: SimulationGrid, pos: tuple[int, int]) -> tuple[int, int] | None:
    """Grid cell under screen position pos, or None outside the grid."""
    cell_w, cell_h = cell_size(rect, grid)
    x = (pos[0] - rect.x) // cell_w
    y = (pos[1] - rect.y) // cell_h
    if not grid.contains(x, y):
        return None
    return x, y


def arrow_points(
    cx: float, cy: float, vx: float, vy: float, length: float
) -> list[tuple[float, float]] | None:
    """Arrow polygon centred on (cx, cy) along (vx, vy); None for a zero-length velocity."""
    if math.hypot(vx, vy) < MIN_ARROW_SPEED:
        return None
    angle = math.atan2(vy, vx)
    c, s = math.cos(angle), math.sin(angle)
    scale = length / ARROW_LENGTH
    points = []
    for px, py in ARROW_SHAPE:
        px = (px - ARROW_LENGTH * 0.5) * scale
        py *= scale
        points.append((cx + px * c - py * s, cy + px * s + py * c))
    return points


def draw_grid(surface: pygame.Surface, grid_rect: pygame.Rect, grid: SimulationGrid) -> None:
    """Draw density as grey squares and velocity as speed-colored arrows."""
    cell_w, cell_h = cell_size(grid_rect, grid)
    rgb = density_to_rgb(grid.density)
    speed = np.hypot(grid.velocity_x, grid.velocity_y)
    arrow_rgb = speed_to_rgb(speed)
    length = min(cell_w, cell_h) * 2 * ARROW_CELL_FRACTION
    for y in range(grid.height):
        for x in range(grid.width):
            r, g, b = (int(c) for c in rgb[y, x])
            left = grid_rect.x + x * cell_w
            top = grid_rect.y + y * cell_h
            pygame.draw.rect(surface, (r, g, b), (left, top, cell_w + 1, cell_h + 1))
            points = arrow_points(
                left + cell_w * 0.5,
                top + cell_h * 0.5,
                float(grid.velocity_x[y, x]),
                float(grid.velocity_y[y, x]),
                length,
            )
            if points is not None:
                color = tuple(int(c) for c in arrow_rgb[y, x])
                pygame.draw.polygon(surface, color, points)
    pygame.draw.rect(surface, BORDER_COLOR, grid_rect, BORDER_PX)
