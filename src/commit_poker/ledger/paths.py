"""Per-user data directory for the ledger file."""

import os
import sys
from pathlib import Path

from ..exceptions import StorageUnavailableError

APP_NAME = "commit-poker"
LEDGER_FILENAME = "highscores.json"


def default_data_dir() -> Path:
    """Platform data directory for Commit Poker.

    ``$XDG_DATA_HOME`` wins when set; otherwise ``~/.local/share`` on Linux,
    ``~/Library/Application Support`` on macOS and ``%LOCALAPPDATA%`` on
    Windows.

    Raises:
        StorageUnavailableError: If no home directory can be determined.
    """
    try:
        xdg = os.environ.get("XDG_DATA_HOME")
        if xdg:
            base = Path(xdg)
        elif sys.platform == "darwin":
            base = Path.home() / "Library" / "Application Support"
        elif os.name == "nt":
            local = os.environ.get("LOCALAPPDATA")
            base = Path(local) if local else Path.home() / "AppData" / "Local"
        else:
            base = Path.home() / ".local" / "share"
    except RuntimeError as e:
        raise StorageUnavailableError(f"could not get data dir: {e}") from e

    return base / APP_NAME


def default_ledger_path() -> Path:
    return default_data_dir() / LEDGER_FILENAME
