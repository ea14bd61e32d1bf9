"""
Display-only color maps. Density is shown as grey (0 = black, 1 = white, clipped
outside [0, 1] since density itself is unbounded). Velocity arrows are colored by
speed: slow arrows sit high on the hue wheel, fast ones slide toward red.
"""

import numpy as np

# Hue (degrees) = ARROW_HUE_SCALE / clamp(speed, ARROW_SPEED_MIN, ARROW_SPEED_MAX): 180 down to 9
ARROW_HUE_SCALE = 90.0
ARROW_SPEED_MIN, ARROW_SPEED_MAX = 0.5, 10.0


def density_to_rgb(density: np.ndarray) -> np.ndarray:
    """Returns (height, width, 3) uint8 grey levels."""
    v = np.clip(np.asarray(density, dtype=np.float64), 0.0, 1.0)
    rgb = np.stack([v, v, v], axis=-1)
    return (rgb * 255).round().astype(np.uint8)


def _hue_to_rgb(hue_deg: np.ndarray) -> np.ndarray:
    """Fully saturated, mid-lightness HSL -> RGB in [0, 1]. hue any shape, returns (..., 3)."""
    h6 = (np.asarray(hue_deg, dtype=np.float64) % 360.0) / 60.0
    r = np.clip(np.abs(h6 - 3.0) - 1.0, 0.0, 1.0)
    g = np.clip(2.0 - np.abs(h6 - 2.0), 0.0, 1.0)
    b = np.clip(2.0 - np.abs(h6 - 4.0), 0.0, 1.0)
    return np.stack([r, g, b], axis=-1)


def speed_to_rgb(speed: np.ndarray) -> np.ndarray:
    """Arrow color per cell from velocity magnitude. Returns (..., 3) uint8."""
    s = np.clip(np.asarray(speed, dtype=np.float64), ARROW_SPEED_MIN, ARROW_SPEED_MAX)
    rgb = _hue_to_rgb(ARROW_HUE_SCALE / s)
    return (rgb * 255).round().astype(np.uint8)
