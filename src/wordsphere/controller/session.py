"""
Word Cloud Session
==================
The context object that owns every piece of mutable state of a running
sphere: the word store, the rotation controller and the viewport.

Why is this file needed?
------------------------
1. Dependency Injection: The window, canvas and animation loop receive this
   one object instead of reaching for module globals.
2. Ordering: Word insertions (including the full layout recompute) are
   applied synchronously, so the next animation tick always sees fresh
   positions.
3. Signals: It notifies the view when the number of distinct words changes.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from PySide6.QtCore import QObject, Signal

from wordsphere.config import InteractionMode, MAX_MANUAL_ROTATION, SPHERE_RADIUS
from wordsphere.controller.projection import DrawCommand, project_all
from wordsphere.controller.rotation import RotationController, clamp
from wordsphere.model.layout import compute_positions
from wordsphere.model.state import Viewport
from wordsphere.model.vector import Vector3
from wordsphere.model.words import FrequencyStore, OccurrenceResult

logger = logging.getLogger(__name__)


class WordCloudSession(QObject):
    """Central session store with a signal for the word counter."""
    stats_changed = Signal(int)  # distinct word count

    def __init__(
        self,
        rotation: Optional[RotationController] = None,
        mode: InteractionMode = InteractionMode.HOVER_PAUSE,
        radius: float = SPHERE_RADIUS,
    ) -> None:
        super().__init__()
        self.store = FrequencyStore()
        self.radius = radius
        self.rotation = rotation if rotation is not None else RotationController(radius=radius)
        self.viewport = Viewport()
        self.mode = InteractionMode(mode)
        self.layout_count = 0

    # ------------------------------------------------------------------
    # Words
    # ------------------------------------------------------------------

    def distinct_word_count(self) -> int:
        return self.store.total_distinct_count()

    def add_word(self, text: str) -> Optional[OccurrenceResult]:
        """
        Submit one word. Empty input is ignored. A new word redistributes
        every word over the sphere.
        """
        result = self.store.record_occurrence(text)
        if result is None:
            return None

        if result.is_new:
            self.redistribute()
        self.stats_changed.emit(self.distinct_word_count())
        return result

    def add_words(self, items: Iterable[tuple[str, int]]) -> None:
        """Bulk insert (text, times) pairs with one layout pass at the end."""
        added_new = False
        for text, times in items:
            for _ in range(max(times, 0)):
                result = self.store.record_occurrence(text)
                if result is None:
                    break
                added_new = added_new or result.is_new

        if added_new:
            self.redistribute()
        self.stats_changed.emit(self.distinct_word_count())

    def redistribute(self) -> None:
        """Reassign a Fibonacci-sphere position to every word."""
        words = self.store.words()
        positions = compute_positions(len(words), self.radius)
        for word, point in zip(words, positions):
            word.position = Vector3.from_array(point)
        self.layout_count += 1
        logger.debug(f"Redistributed {len(words)} words over the sphere.")

    def font_size_for(self, text: str) -> Optional[int]:
        word = self.store.get(text)
        if word is None:
            return None
        return word.font_size

    # ------------------------------------------------------------------
    # Viewport & pointer
    # ------------------------------------------------------------------

    def set_viewport_size(self, width: float, height: float) -> None:
        self.viewport.width = width
        self.viewport.height = height

    def set_pointer_position(self, x: float, y: float) -> None:
        center = self.viewport.center
        if self.mode is InteractionMode.HOVER_PAUSE:
            self.rotation.update_hover(x, y, center)
            return

        # Pointer-rotate: normalized offset from the center steers the target
        half_w = max(self.viewport.center_x, 1.0)
        half_h = max(self.viewport.center_y, 1.0)
        target_y = clamp((x - center[0]) / half_w * MAX_MANUAL_ROTATION,
                         -MAX_MANUAL_ROTATION, MAX_MANUAL_ROTATION)
        target_x = clamp((y - center[1]) / half_h * MAX_MANUAL_ROTATION,
                         -MAX_MANUAL_ROTATION, MAX_MANUAL_ROTATION)
        self.rotation.set_manual_target(target_x, target_y)

    def clear_pointer(self) -> None:
        self.rotation.clear_hover()
        if self.mode is InteractionMode.POINTER_ROTATE:
            self.rotation.set_manual_target(0.0, 0.0)

    # ------------------------------------------------------------------
    # Frame
    # ------------------------------------------------------------------

    def frame(self, now: Optional[float] = None) -> list[DrawCommand]:
        """Advance the rotation one tick and project every word."""
        rotation = self.rotation.step(now)
        return project_all(self.store, rotation, self.viewport.center)
