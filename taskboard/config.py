import shutil
from functools import lru_cache
from pathlib import Path

import yaml

from .lib import paths

DEFAULTS = {
    "db_file": "taskboard.db",
    "log_level": "INFO",
    "host": "127.0.0.1",
    "port": 8000,
    "busy_timeout_ms": 5000,
    "cors_origins": ["http://localhost:3000"],
}


def get_default_config_path() -> Path:
    return paths.package_root() / "config.yaml"


def config_file() -> Path:
    """Return config file path in the data directory."""
    return paths.data_dir() / "config.yaml"


def _validate_config(cfg: dict) -> None:
    """Validate config structure. Fail fast on invalid types."""
    if not isinstance(cfg, dict):
        raise ValueError(f"Config must be a dict, got {type(cfg).__name__}")

    if "cors_origins" in cfg and not isinstance(cfg.get("cors_origins"), list):
        raise ValueError("Config 'cors_origins' must be a list")

    if "port" in cfg and not isinstance(cfg.get("port"), int):
        raise ValueError("Config 'port' must be an integer")

    if "busy_timeout_ms" in cfg and not isinstance(cfg.get("busy_timeout_ms"), int):
        raise ValueError("Config 'busy_timeout_ms' must be an integer")


def clear_cache():
    load_config.cache_clear()


@lru_cache(maxsize=1)
def load_config() -> dict:
    """Load config.yaml over the built-in defaults."""
    path = config_file()
    if not path.exists():
        return dict(DEFAULTS)
    with open(path) as f:
        cfg = yaml.safe_load(f) or {}
    _validate_config(cfg)
    return {**DEFAULTS, **cfg}


def get(key: str):
    return load_config().get(key, DEFAULTS.get(key))


def init_config() -> Path:
    """Initialize <data dir>/config.yaml from defaults if missing."""
    target = config_file()
    if target.exists():
        return target

    target.parent.mkdir(parents=True, exist_ok=True)

    default_config_path = get_default_config_path()
    if not default_config_path.exists():
        raise FileNotFoundError(f"Default config not found at {default_config_path}")

    shutil.copy(default_config_path, target)
    clear_cache()
    return target
