"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths scattered throughout the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (the stylesheet) when the app is frozen into an .exe.
3. Overrides: Display locale and logging can be tuned through environment
   variables without touching the code.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    STYLESHEET_PATH (str): Absolute path to the Qt stylesheet.
    DISPLAY_LOCALE (str): Locale used to format quantities (e.g. "pt_BR").
    LOG_LEVEL (int): Logging level for the 'packcalc' logger.
    LOG_FILE (str | None): Optional log file path.
"""
import logging
import sys
import os
from pathlib import Path
from typing import Optional


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/packcalc/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


def get_log_level(name: Optional[str], default: int = logging.WARNING) -> int:
    """Map a level name like "debug" to its logging constant."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
STYLESHEET_PATH: str = os.path.join(ASSETS_PATH, "style.qss")

DISPLAY_LOCALE: str = os.environ.get("PACKCALC_LOCALE", "pt_BR")
LOG_LEVEL: int = get_log_level(os.environ.get("PACKCALC_LOG_LEVEL"))
LOG_FILE: Optional[str] = os.environ.get("PACKCALC_LOG_FILE") or None
