from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Protocol, Sequence

from wordsphere.config import (
    PERSPECTIVE, DEPTH_SCALE_RANGE, BRIGHTNESS_RANGE, OPACITY_RANGE,
    FREQUENCY_OPACITY_STEP, MAX_FREQUENCY_BOOST, COLOR_SATURATION,
    COLOR_BASE_LIGHTNESS, COLOR_DEPTH_LIGHTNESS, Z_ORDER_OFFSET,
)
from wordsphere.controller.rotation import clamp
from wordsphere.model.vector import Vector3
from wordsphere.model.words import Word, font_size_for_frequency


@dataclass(frozen=True)
class DrawCommand:
    """Screen-space attributes of one word for one frame."""
    text: str
    screen_x: float
    screen_y: float
    font_size_px: int
    opacity: float
    scale: float  # clamped depth scale
    brightness: float
    hue: float
    lightness: float  # percent
    glow_alpha: float
    z_order: int

    @property
    def brightness_filter(self) -> str:
        return f"brightness({self.brightness:g})"

    @property
    def color(self) -> str:
        return f"hsl({self.hue:g}, {COLOR_SATURATION:g}%, {self.lightness:g}%)"


class DrawSink(Protocol):
    """Anything that can draw a frame of word commands (widget, recorder, ...)."""
    def submit(self, commands: Sequence[DrawCommand]) -> None: ...


def project(
    position: Vector3,
    rotation_x: float,
    rotation_y: float,
    frequency: int,
    base_hue: float,
    center: tuple[float, float],
    text: str = "",
    perspective: float = PERSPECTIVE,
) -> DrawCommand:
    """
    Rotate a word's sphere position and project it to the screen.

    The rotation about the vertical axis is applied before the one about the
    horizontal axis.
    """
    rotated = position.rotate_y(rotation_y).rotate_x(rotation_x)

    scale = perspective / (perspective - rotated.z)
    screen_x = rotated.x * scale + center[0]
    screen_y = rotated.y * scale + center[1]

    depth_scale = clamp(scale, *DEPTH_SCALE_RANGE)
    brightness = clamp(0.7 + depth_scale * 0.5, *BRIGHTNESS_RANGE)
    frequency_boost = min(MAX_FREQUENCY_BOOST, (frequency - 1) * FREQUENCY_OPACITY_STEP)
    opacity = clamp(depth_scale + frequency_boost, *OPACITY_RANGE)

    return DrawCommand(
        text=text,
        screen_x=screen_x,
        screen_y=screen_y,
        font_size_px=font_size_for_frequency(frequency),
        opacity=opacity,
        scale=depth_scale,
        brightness=brightness,
        hue=base_hue,
        lightness=COLOR_BASE_LIGHTNESS + depth_scale * COLOR_DEPTH_LIGHTNESS,
        glow_alpha=0.2 + depth_scale * 0.2,
        z_order=math.floor(rotated.z + Z_ORDER_OFFSET),
    )


def project_all(
    words: Iterable[Word],
    rotation: tuple[float, float],
    center: tuple[float, float],
) -> list[DrawCommand]:
    """Project every word; nothing is cached between frames."""
    rotation_x, rotation_y = rotation
    return [
        project(
            word.position, rotation_x, rotation_y,
            word.frequency, word.base_hue, center, text=word.text,
        )
        for word in words
    ]
