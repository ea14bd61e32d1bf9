"""Load/save simulation and UI parameters. Config lives in configs/settings.json."""

import json
import logging
from pathlib import Path

from fluid.constants import (
    ADVECTION_STEPS,
    DEFAULT_HEIGHT,
    DEFAULT_INIT_MODE,
    DEFAULT_WIDTH,
    DIFFUSION_RATE,
    DIFFUSION_SWEEPS,
)

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent / "configs"
CONFIG_FILE = CONFIG_DIR / "settings.json"


def load_config(path: Path | str | None = None) -> dict:
    """Defaults merged with the file at path (or CONFIG_FILE). Missing or broken file -> defaults."""
    p = Path(path) if path is not None else CONFIG_FILE
    if not p.exists():
        return _default_config()
    try:
        with open(p, "r") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Could not read config %s (%s); using defaults", p, exc)
        return _default_config()
    if not isinstance(data, dict):
        logger.warning("Config %s is not a JSON object; using defaults", p)
        return _default_config()
    logger.info("Loaded config %s", p)
    return _merge_defaults(data)


def save_config(params: dict, path: Path | str | None = None) -> Path:
    p = Path(path) if path is not None else CONFIG_FILE
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w") as f:
        json.dump(params, f, indent=2)
    logger.info("Saved config %s", p)
    return p


def _default_config() -> dict:
    return {
        "world": {"width": DEFAULT_WIDTH, "height": DEFAULT_HEIGHT},
        "cell_size": 50,
        "fps": 60,
        "diffusion_rate": DIFFUSION_RATE,
        "diffusion_sweeps": DIFFUSION_SWEEPS,
        "advection_steps": ADVECTION_STEPS,
        "init_mode": DEFAULT_INIT_MODE,
        "seed": -1,
        "drag_gain": 0.5,
        "test_pattern": False,
        "log_level": "INFO",
    }


def _merge_defaults(data: dict) -> dict:
    d = _default_config()
    if isinstance(data.get("world"), dict):
        d["world"] = {**d["world"], **data["world"]}
    for k in (
        "cell_size", "fps", "diffusion_rate", "diffusion_sweeps", "advection_steps",
        "init_mode", "seed", "drag_gain", "test_pattern", "log_level",
    ):
        if k in data:
            d[k] = data[k]
    return d
