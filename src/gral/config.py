"""
Configuration & Global Defaults
===============================
This module serves as the central registry for default styling constants and
resource paths used across the library.

Why is this file needed?
------------------------
1. Consistency: Plots, legends and labels share one set of default fonts and
   colors instead of hardcoding them in every drawable.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find bundled resources when an application embedding GRAL is frozen.

Exports:
    DEFAULT_FONT_FAMILY (str): Font family used by labels and axes.
    DEFAULT_FONT_SIZE (float): Point size used by labels and axes.
    COLOR1, COLOR2 (tuple): Default RGB palette of the examples.
    EXPORT_DPI (int): Resolution assumed for vector exports.
"""
import os
import sys
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # config.py is in src/gral/
    current_file_path: Path = Path(__file__)
    package_root: Path = current_file_path.parent
    return os.path.join(str(package_root), relative_path)


# Fonts
DEFAULT_FONT_FAMILY: str = "Sans Serif"
DEFAULT_FONT_SIZE: float = 10.0

# Colors (RGB)
COLOR1: tuple[int, int, int] = (55, 170, 200)
COLOR2: tuple[int, int, int] = (200, 80, 75)
DEFAULT_FOREGROUND: tuple[int, int, int] = (0, 0, 0)
DEFAULT_BACKGROUND: tuple[int, int, int] = (255, 255, 255)

# Export
EXPORT_DPI: int = 96
DEFAULT_EXPORT_WIDTH: float = 800.0
DEFAULT_EXPORT_HEIGHT: float = 600.0

# Environment
LOG_LEVEL_ENV: str = "GRAL_LOG_LEVEL"
