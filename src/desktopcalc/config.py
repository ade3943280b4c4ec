"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps identifiers, display texts and precision in one place
   instead of scattering literals through the model and the view.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (the keypad stylesheet) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    STYLESHEET_PATH (str): Absolute path to the keypad stylesheet.
    LOG_LEVEL (int): Logging level taken from DESKTOPCALC_LOG_LEVEL.
    LOG_FILE (str | None): Optional log file path from DESKTOPCALC_LOG_FILE.
"""
import logging
import os
import sys
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
    # config.py is in src/desktopcalc/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


def get_log_level(default: int = logging.INFO) -> int:
    """Resolve DESKTOPCALC_LOG_LEVEL (e.g. "DEBUG") to a logging level."""
    name = os.environ.get("DESKTOPCALC_LOG_LEVEL", "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


# Application identity
ORG_ID = "desktopcalc"
APP_ID = "desktopcalc"
VISIBLE_APP_NAME = "Calculator"

# Arithmetic
RESULT_DECIMAL_PLACES = 3

# Display texts
EMPTY_ENTRY_TEXT = "0"
DIV_BY_ZERO_TOP_TEXT = "DIV BY ZERO"
DIV_BY_ZERO_BOTTOM_TEXT = "INFINITY"

# Window
WINDOW_SIZE = (320, 480)

# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
STYLESHEET_PATH: str = os.path.join(ASSETS_PATH, "calculator.qss")
LOG_LEVEL: int = get_log_level()
LOG_FILE: Optional[str] = os.environ.get("DESKTOPCALC_LOG_FILE") or None
