"""
Rotation & Viewport State (Data Model)
======================================
Plain data holders for the temporal state of the sphere.

Why is this file needed?
------------------------
1. State Management: The rotation/hover/drift values are owned by exactly one
   session object instead of living as module globals.
2. Decoupling: Controllers write to these objects; the view only reads the
   projected result.

Classes:
    Axes: A pair of per-axis values (x, y).
    RotationState: Manual, automatic and hover rotation state.
    Viewport: Size of the drawing surface and its center.
"""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Axes:
    x: float = 0.0
    y: float = 0.0


@dataclass
class RotationState:
    """
    Rotation state of the sphere. All angles in radians, velocities in
    radians per frame, times in milliseconds.
    """
    manual_target: Axes = field(default_factory=Axes)
    manual_current: Axes = field(default_factory=Axes)
    auto_angle: Axes = field(default_factory=Axes)
    auto_velocity: Axes = field(default_factory=Axes)

    # 1 = drifting freely, 0 = paused under the pointer
    hover_blend: float = 1.0
    hover_active: bool = False
    next_shuffle_time: float = 0.0

    @property
    def hover_target_blend(self) -> float:
        return 0.0 if self.hover_active else 1.0


@dataclass
class Viewport:
    width: float = 0.0
    height: float = 0.0

    @property
    def center_x(self) -> float:
        return max(self.width, 0.0) / 2.0

    @property
    def center_y(self) -> float:
        return max(self.height, 0.0) / 2.0

    @property
    def center(self) -> tuple[float, float]:
        return self.center_x, self.center_y
