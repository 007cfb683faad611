"""
Rotation Controller
===================
Advances the sphere's rotation once per frame.

Why is this file needed?
------------------------
1. Motion: It combines the eased manual rotation with a randomized
   auto-drift whose direction changes every few seconds.
2. Hover damping: A smoothed blend factor slows both motions to a stop while
   the pointer is over the sphere, and speeds them back up when it leaves.

Classes:
    RotationController: Owns and advances a RotationState.
"""
from __future__ import annotations

import logging
import math
import time
from typing import Callable, Optional

import numpy as np

from wordsphere.config import (
    SPHERE_RADIUS, HOVER_RADIUS_FACTOR, HOVER_EASE, MANUAL_EASE, TWO_PI,
    AUTO_ROTATE_SPEED, AUTO_SPEED_MIN_FACTOR, AUTO_SPEED_MAX_FACTOR,
    SHUFFLE_INITIAL_INTERVAL_MS, SHUFFLE_INTERVAL_MS, SHUFFLE_JITTER_MS,
)
from wordsphere.model.state import RotationState

logger = logging.getLogger(__name__)


def now_ms() -> float:
    """Monotonic clock in milliseconds."""
    return time.perf_counter() * 1000.0


def wrap_angle(angle: float) -> float:
    """Bring an angle back into (-2pi, 2pi), keeping its sign."""
    if angle >= TWO_PI or angle <= -TWO_PI:
        angle = math.fmod(angle, TWO_PI)
    return angle


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


class RotationController:
    """
    Rotation/hover/auto-drift state machine.

    The controller is independent of layout and projection: each call to
    `step()` yields the pair of total rotation angles for the frame.
    """

    def __init__(
        self,
        state: Optional[RotationState] = None,
        *,
        radius: float = SPHERE_RADIUS,
        base_speed: float = AUTO_ROTATE_SPEED,
        rng: Optional[np.random.Generator] = None,
        clock: Callable[[], float] = now_ms,
        now: Optional[float] = None,
    ) -> None:
        self.state = state if state is not None else RotationState()
        self.radius = radius
        self.base_speed = base_speed
        self.rng = rng if rng is not None else np.random.default_rng()
        self.clock = clock

        self.shuffle(self.clock() if now is None else now, initial=True)

    # ------------------------------------------------------------------
    # Pointer input
    # ------------------------------------------------------------------

    def is_point_inside_sphere(self, x: float, y: float, center: tuple[float, float]) -> bool:
        """True when (x, y) lies within the sphere's projected footprint (R * 1.2)."""
        dx = x - center[0]
        dy = y - center[1]
        hover_radius = self.radius * HOVER_RADIUS_FACTOR
        return dx * dx + dy * dy <= hover_radius * hover_radius

    def update_hover(self, x: float, y: float, center: tuple[float, float]) -> bool:
        self.state.hover_active = self.is_point_inside_sphere(x, y, center)
        return self.state.hover_active

    def clear_hover(self) -> None:
        self.state.hover_active = False

    def set_manual_target(self, x: float, y: float) -> None:
        self.state.manual_target.x = x
        self.state.manual_target.y = y

    # ------------------------------------------------------------------
    # Auto drift
    # ------------------------------------------------------------------

    def random_auto_speed(self) -> float:
        """Uniform magnitude in [0.35, 1.6] * base speed with a random sign."""
        low = self.base_speed * AUTO_SPEED_MIN_FACTOR
        high = self.base_speed * AUTO_SPEED_MAX_FACTOR
        magnitude = low + self.rng.random() * (high - low)
        direction = -1.0 if self.rng.random() < 0.5 else 1.0
        return magnitude * direction

    def shuffle(self, now: float, initial: bool = False) -> None:
        """Resample the drift velocity and schedule the next resample."""
        velocity = self.state.auto_velocity
        velocity.x = self.random_auto_speed()
        velocity.y = self.random_auto_speed()

        base_interval = SHUFFLE_INITIAL_INTERVAL_MS if initial else SHUFFLE_INTERVAL_MS
        self.state.next_shuffle_time = now + base_interval + self.rng.random() * SHUFFLE_JITTER_MS
        logger.debug(
            f"Auto drift resampled: vx={velocity.x:.5f}, vy={velocity.y:.5f}, "
            f"next in {self.state.next_shuffle_time - now:.0f} ms"
        )

    # ------------------------------------------------------------------
    # Per-frame update
    # ------------------------------------------------------------------

    def update_blend(self) -> float:
        s = self.state
        s.hover_blend += (s.hover_target_blend - s.hover_blend) * HOVER_EASE
        s.hover_blend = clamp(s.hover_blend, 0.0, 1.0)
        return s.hover_blend

    def ease_manual(self) -> None:
        s = self.state
        ease = MANUAL_EASE * s.hover_blend
        s.manual_current.x += (s.manual_target.x - s.manual_current.x) * ease
        s.manual_current.y += (s.manual_target.y - s.manual_current.y) * ease

    def accumulate_auto(self) -> None:
        s = self.state
        s.auto_angle.x = wrap_angle(s.auto_angle.x + s.auto_velocity.x * s.hover_blend)
        s.auto_angle.y = wrap_angle(s.auto_angle.y + s.auto_velocity.y * s.hover_blend)

    @property
    def total_rotation(self) -> tuple[float, float]:
        """(rotation_x, rotation_y) = manual + auto, per axis."""
        s = self.state
        return (
            s.manual_current.x + s.auto_angle.x,
            s.manual_current.y + s.auto_angle.y,
        )

    def step(self, now: Optional[float] = None) -> tuple[float, float]:
        """
        Advance one frame: resample drift if due, ease the hover blend, ease
        the manual rotation, accumulate the auto rotation.

        Returns:
            The total rotation (rotation_x, rotation_y) for this frame.
        """
        if now is None:
            now = self.clock()
        if now >= self.state.next_shuffle_time:
            self.shuffle(now)

        self.update_blend()
        self.ease_manual()
        self.accumulate_auto()
        return self.total_rotation
