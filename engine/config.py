# 📦 engine/config.py
# ─────────────────────────────
# Matching config loader (weights, age ranges, sentinel)

import os
from pathlib import Path

import structlog
import yaml

log = structlog.get_logger()

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "data" / "matching.yml"


def load_matching_config(path=None):
    """Read the matching YAML config. MATCHING_CONFIG_PATH overrides the default path."""
    config_path = Path(path or os.getenv("MATCHING_CONFIG_PATH") or DEFAULT_CONFIG_PATH)
    with open(config_path, "r") as f:
        config = yaml.safe_load(f)
    log.debug("Loaded matching config", path=str(config_path))
    return config


CONFIG = load_matching_config()

WEIGHTS: dict[str, float] = CONFIG["weights"]["default"]
AGE_RANGES: dict[str, tuple[int, int]] = {
    label: (int(bounds[0]), int(bounds[1])) for label, bounds in CONFIG["age_ranges"].items()
}
NO_PREFERENCE: str = CONFIG.get("no_preference", "No preference")
