import os
from pathlib import Path


def data_dir() -> Path:
    override = os.environ.get("TASKBOARD_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".taskboard"


def package_root() -> Path:
    return Path(__file__).resolve().parent.parent


def migrations_dir() -> Path:
    return package_root() / "migrations"


def log_file() -> Path:
    return data_dir() / "taskboard.log"
