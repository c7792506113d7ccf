from __future__ import annotations

import math
from typing import Optional

from PySide6.QtCore import Qt, QRectF, Signal
from PySide6.QtGui import QPainter, QColor, QPainterPath
from PySide6.QtWidgets import QWidget

from core.arc import PieSlice
from core.config import BACKGROUND, CORNER_RADIUS, INDICATOR_SIZE
from core.progress import ProgressIndicator
from .animation import QtAnimationEngine


def slice_path(pie: PieSlice) -> QPainterPath:
    path = QPainterPath()
    if pie.is_degenerate:
        return path
    cx, cy = pie.center
    r = pie.radius
    path.moveTo(cx, cy)
    # Qt angles are degrees counter-clockwise from 3 o'clock
    path.arcTo(QRectF(cx - r, cy - r, 2 * r, 2 * r),
               -math.degrees(pie.start_angle), -math.degrees(pie.sweep))
    path.closeSubpath()
    return path


class PieIndicator(QWidget):
    spinningChanged = Signal(bool)

    def __init__(self, size: int = INDICATOR_SIZE, parent=None):
        super().__init__(parent)
        self._engine = QtAnimationEngine(self.update, self)
        self._state = ProgressIndicator(self._engine, request_redraw=self.update)
        self._background = QColor(BACKGROUND)
        self.setFixedSize(size, size)

    @property
    def state(self) -> ProgressIndicator:
        return self._state

    def progress(self) -> float:
        return self._state.progress

    def setProgress(self, value: float):
        self._state.set_progress(value)

    def setProgressAnimated(self, value: float):
        self._state.set_progress_animated(value)

    def advance(self, step: float):
        self._state.advance(step)

    def setTintColor(self, color: Optional[QColor]):
        self._state.set_tint_color(color.name() if color is not None else None)

    def tintColor(self) -> QColor:
        return QColor(self._state.tint_color)

    def isSpinning(self) -> bool:
        return self._state.spinning

    def spin(self):
        if not self._state.spinning:
            self._state.spin()
            self.spinningChanged.emit(True)

    def stop(self):
        if self._state.spinning:
            self._state.stop()
            self.spinningChanged.emit(False)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.setPen(Qt.NoPen)
        painter.setBrush(self._background)
        painter.drawRoundedRect(QRectF(self.rect()), CORNER_RADIUS, CORNER_RADIUS)

        pie = self._state.render(self.width(), self.height())
        painter.setBrush(QColor(pie.fill))
        painter.drawPath(slice_path(pie))
        painter.end()
