"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: Every tuning constant of the sphere (radius, perspective,
   easing factors, drift bounds) lives in one place instead of being
   scattered through the math modules.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (the sample word list) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    SAMPLE_WORDS_PATH (str): Absolute path to the seed word list.
    InteractionMode: How pointer movement affects the sphere.
"""
import sys
import os
import math
from enum import Enum
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/wordsphere/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


class InteractionMode(str, Enum):
    """How pointer movement over the canvas is interpreted."""
    HOVER_PAUSE = "hover"       # pointer over the sphere pauses the drift
    POINTER_ROTATE = "rotate"   # pointer offset steers the manual rotation


# Paths
ASSETS_PATH: str = get_resource_path("assets")
SAMPLE_WORDS_PATH: str = os.path.join(ASSETS_PATH, "sample_words.json")

# Sphere geometry
SPHERE_RADIUS: float = 300.0
PERSPECTIVE: float = 800.0
HOVER_RADIUS_FACTOR: float = 1.2
GOLDEN_ANGLE: float = math.pi * (3.0 - math.sqrt(5.0))
TWO_PI: float = 2.0 * math.pi

# Rotation / easing
HOVER_EASE: float = 0.08
MANUAL_EASE: float = 0.05
MAX_MANUAL_ROTATION: float = 0.3  # rad, pointer-rotate mode

# Auto drift
AUTO_ROTATE_SPEED: float = 0.002  # rad per frame
AUTO_SPEED_MIN_FACTOR: float = 0.35
AUTO_SPEED_MAX_FACTOR: float = 1.6
SHUFFLE_INITIAL_INTERVAL_MS: float = 2500.0
SHUFFLE_INTERVAL_MS: float = 4000.0
SHUFFLE_JITTER_MS: float = 4000.0

# Word appearance
HUE_PALETTE: tuple[int, ...] = (190, 200, 210, 160)  # ocean + land hues
MIN_FONT_SIZE: int = 12
MAX_FONT_SIZE: int = 40
FONT_SIZE_INCREMENT: int = 3
FREQUENCY_OPACITY_STEP: float = 0.04
MAX_FREQUENCY_BOOST: float = 0.35
COLOR_SATURATION: float = 70.0
COLOR_BASE_LIGHTNESS: float = 50.0
COLOR_DEPTH_LIGHTNESS: float = 15.0

# Depth clamps
DEPTH_SCALE_RANGE: tuple[float, float] = (0.4, 1.3)
BRIGHTNESS_RANGE: tuple[float, float] = (0.6, 1.4)
OPACITY_RANGE: tuple[float, float] = (0.35, 1.0)
Z_ORDER_OFFSET: float = 1000.0

# Animation / window
FRAME_INTERVAL_MS: int = 16
DEFAULT_WINDOW_SIZE: tuple[int, int] = (1200, 800)
VISIBLE_APP_NAME: str = "Word Sphere"

if not os.path.exists(ASSETS_PATH):
    print(f"WARNING: Assets path not found at {ASSETS_PATH}")
