"""
Path utilities for locating the settings file.

Override: STRUCTURAL_DIARY_HOME environment variable
Default: Qt's per-user generic config location (e.g. ~/.config on Linux)
"""
from __future__ import annotations

import os
from pathlib import Path

from PySide6.QtCore import QStandardPaths

APP_DIR_NAME = "structural-diary"
SETTINGS_FILE_NAME = "settings.json"
HOME_ENV_VAR = "STRUCTURAL_DIARY_HOME"


def get_app_data_dir() -> Path:
    """
    Get the directory holding persistent state.

    Not created here; the settings store creates it on first save.
    """
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()

    base = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.GenericConfigLocation)
    if not base:
        base = str(Path.home() / ".config")
    return Path(base) / APP_DIR_NAME


def get_settings_path() -> Path:
    """Path of the JSON settings file."""
    return get_app_data_dir() / SETTINGS_FILE_NAME
