"""
Sphere Canvas (QPainter draw sink)
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from PySide6.QtCore import Qt, QEvent, QPointF, QRectF
from PySide6.QtGui import (
    QColor, QFont, QFontMetricsF, QPainter, QMouseEvent, QPaintEvent, QResizeEvent
)
from PySide6.QtWidgets import QWidget

from wordsphere.config import COLOR_SATURATION
from wordsphere.controller.projection import DrawCommand
from wordsphere.controller.session import WordCloudSession

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = QColor(8, 16, 32)
GLOW_COLOR = (120, 190, 255)


def command_color(command: DrawCommand) -> QColor:
    """HSL color of a command with its brightness filter and opacity applied."""
    lightness = min(1.0, (command.lightness / 100.0) * command.brightness)
    color = QColor.fromHslF(
        (command.hue % 360) / 360.0,
        COLOR_SATURATION / 100.0,
        lightness,
    )
    color.setAlphaF(command.opacity)
    return color


class SphereCanvas(QWidget):
    """
    Paints the words of the current frame, far ones first.
    Forwards size and pointer events to the session.
    """
    def __init__(self, session: WordCloudSession, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.session = session
        self._commands: list[DrawCommand] = []
        self._font_family = self.font().family()

        self.setMouseTracking(True)
        self.setAutoFillBackground(False)
        self.setMinimumSize(400, 300)

    # ---- DrawSink ----

    def submit(self, commands: Sequence[DrawCommand]) -> None:
        self._commands = sorted(commands, key=lambda c: c.z_order)
        self.update()

    # ---- Qt events ----

    def resizeEvent(self, event: QResizeEvent) -> None:
        size = event.size()
        self.session.set_viewport_size(size.width(), size.height())
        super().resizeEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        pos = event.position()
        self.session.set_pointer_position(pos.x(), pos.y())
        super().mouseMoveEvent(event)

    def leaveEvent(self, event: QEvent) -> None:
        self.session.clear_pointer()
        super().leaveEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.setRenderHint(QPainter.TextAntialiasing)
        painter.fillRect(self.rect(), BACKGROUND_COLOR)

        for command in self._commands:
            self._draw_word(painter, command)

        painter.end()

    def _draw_word(self, painter: QPainter, command: DrawCommand) -> None:
        font = QFont(self._font_family)
        font.setPixelSize(max(1, round(command.font_size_px * command.scale)))
        painter.setFont(font)

        # Text is centered on the projected point
        metrics = QFontMetricsF(font)
        w = metrics.horizontalAdvance(command.text)
        h = metrics.height()
        rect = QRectF(command.screen_x - w / 2.0, command.screen_y - h / 2.0, w, h)

        glow = QColor(*GLOW_COLOR)
        glow.setAlphaF(command.glow_alpha * command.opacity)
        painter.setPen(glow)
        painter.drawText(rect.translated(QPointF(0.0, 1.0)), Qt.AlignCenter, command.text)

        painter.setPen(command_color(command))
        painter.drawText(rect, Qt.AlignCenter, command.text)
