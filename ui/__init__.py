"""UI: grid view and color maps."""

from ui.grid_view import draw_grid, cell_at
from ui.colors import density_to_rgb, speed_to_rgb

__all__ = ["draw_grid", "cell_at", "density_to_rgb", "speed_to_rgb"]
