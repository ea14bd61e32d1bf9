"""
App shell: window and main loop. Owns the one SimulationGrid and advances it once
per frame with the frame's dt. Mouse drag pushes velocity into the cell under the
cursor; R resets the grid; Esc or closing the window quits.
"""

import logging

import pygame

from fluid import SimulationGrid, step
from fluid.seed_util import make_rng
from ui.grid_view import cell_at, draw_grid
from logging_config import setup_logging
import config

TITLE = "Fluid Simulation"
BACKGROUND = (102, 102, 102)

logger = logging.getLogger("app")


def drag_velocity(rel: tuple[int, int], gain: float) -> tuple[float, float]:
    """Screen-space mouse delta -> grid-space velocity. Screen and grid y both point down."""
    return rel[0] * gain, rel[1] * gain


def build_grid(cfg: dict) -> tuple[SimulationGrid, int | None]:
    """Grid from config; returns (grid, seed_used). seed_used is None unless mode is random."""
    width = cfg["world"].get("width", 10)
    height = cfg["world"].get("height", 10)
    mode = cfg.get("init_mode", "spike")
    rng, seed_used = None, None
    if mode == "random":
        rng, seed_used = make_rng(cfg.get("seed", -1))
        logger.info("Random start with seed %d", seed_used)
    return SimulationGrid(width=width, height=height, mode=mode, rng=rng), seed_used


def step_params(cfg: dict) -> dict:
    """Solver keyword arguments for step(), coerced from JSON numbers."""
    return {
        "diffusion_rate": float(cfg["diffusion_rate"]),
        "diffusion_sweeps": int(cfg["diffusion_sweeps"]),
        "advection_steps": int(cfg["advection_steps"]),
        "test_pattern": bool(cfg.get("test_pattern", False)),
    }


def run() -> None:
    setup_logging()
    cfg = config.load_config()
    setup_logging(cfg.get("log_level", "INFO"))
    params = step_params(cfg)

    grid, _ = build_grid(cfg)
    cell_px = int(cfg.get("cell_size", 50))
    fps = max(1, int(cfg.get("fps", 60)))
    gain = float(cfg.get("drag_gain", 0.5))

    pygame.init()
    screen = pygame.display.set_mode((grid.width * cell_px, grid.height * cell_px))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    grid_rect = pygame.Rect(0, 0, grid.width * cell_px, grid.height * cell_px)

    elapsed = 0.0
    running = True

    while running:
        dt_s = clock.tick(fps) / 1000.0
        elapsed += dt_s

        # Input applied between steps only
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                    break
                if event.key == pygame.K_r:
                    grid.reset()
            elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
                cell = cell_at(grid_rect, grid, event.pos)
                if cell is not None:
                    grid.inject(cell[0], cell[1], drag_velocity(event.rel, gain))

        step(grid, dt_s, elapsed=elapsed, **params)

        screen.fill(BACKGROUND)
        draw_grid(screen, grid_rect, grid)
        pygame.display.flip()

    pygame.quit()
    logger.info("Exited after %.1f s", elapsed)


if __name__ == "__main__":
    run()
