"""
Configuration for the Wheel of Life tracker.

Precedence: environment (including .env) > YAML settings file > defaults.
"""

import logging
import os
import yaml
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

SETTINGS_FILE = Path(os.getenv("WHEEL_SETTINGS", "wheel.yaml"))


def load_settings_file(path: Path = SETTINGS_FILE) -> dict:
    """Load optional YAML overrides. Missing or unreadable file -> {}."""
    if not path.exists():
        return {}
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


_settings = load_settings_file()


def _setting(name: str, default):
    """Resolve one setting: WHEEL_<NAME> env var, then YAML key, then default."""
    env_value = os.getenv(f"WHEEL_{name.upper()}")
    if env_value is not None:
        return env_value
    return _settings.get(name, default)


# Storage
DATA_DIR: Path = Path(_setting("data_dir", "data"))
STORAGE_BACKEND: str = str(_setting("storage_backend", "json"))
STORAGE_KEY: str = str(_setting("storage_key", "wheel-of-life-assessments:v1"))

# Web / logging
WEB_PORT: int = int(_setting("web_port", 5001))
WEB_URL = f"http://localhost:{WEB_PORT}"
LOG_LEVEL: str = str(_setting("log_level", "INFO")).upper()

# Scoring rules
MIN_SCORE = 0
MAX_SCORE = 10
DEFAULT_SCORE = 5
MIN_CATEGORIES = 4
PRIORITY_COUNT = 3

# Chart axis (fixed for every render)
CHART_AXIS_MIN = 0
CHART_AXIS_MAX = 10
CHART_TICK_STEP = 2
