from __future__ import annotations

from pathlib import Path

from platformdirs import PlatformDirs

APP_NAME = "Pokedex"
DATA_FILE_NAME = "pokeymon.json"


def default_data_dir() -> Path:
    """Return the per-user private data directory for this installation.

    Linux: ~/.local/share/Pokedex
    macOS: ~/Library/Application Support/Pokedex
    Windows: %LOCALAPPDATA%\\Pokedex
    """
    return Path(PlatformDirs(appname=APP_NAME, appauthor=False).user_data_dir)


def default_data_file() -> Path:
    return default_data_dir() / DATA_FILE_NAME


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path
