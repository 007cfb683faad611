"""
Animation Loop
==============
Drives the sphere with one tick per display refresh.

Why is this file needed?
------------------------
1. Scheduling: A QTimer on the GUI thread calls `tick()` about 60 times a
   second; control returns to the Qt event loop between ticks.
2. Sequencing: Each tick advances the rotation, projects every word and
   hands the finished frame to the draw sink.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from wordsphere.config import FRAME_INTERVAL_MS
from wordsphere.controller.projection import DrawSink
from wordsphere.controller.session import WordCloudSession

logger = logging.getLogger(__name__)


class AnimationLoop(QObject):
    # Number of draw commands submitted in the last frame
    frame_rendered = Signal(int)

    def __init__(
        self,
        session: WordCloudSession,
        sink: DrawSink,
        interval_ms: int = FRAME_INTERVAL_MS,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.session = session
        self.sink = sink
        self.frame_count = 0

        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self.tick)

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    def start(self) -> None:
        logger.info(f"Animation loop started ({self._timer.interval()} ms per frame).")
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()
        logger.info(f"Animation loop stopped after {self.frame_count} frames.")

    def tick(self, now: Optional[float] = None) -> None:
        """Advance rotation, project all words, submit the frame."""
        commands = self.session.frame(now)
        self.sink.submit(commands)
        self.frame_count += 1
        self.frame_rendered.emit(len(commands))
