from __future__ import annotations

from typing import Callable, Dict, Optional

from PySide6.QtCore import QObject, QEasingCurve, QVariantAnimation, QAbstractAnimation

from core.animation import Animation


class QtAnimationEngine(QObject):
    """Runs core Animation descriptors on QVariantAnimation, one per key."""

    def __init__(self, on_frame: Optional[Callable[[], None]] = None, parent=None):
        super().__init__(parent)
        self.on_frame = on_frame
        self._running: Dict[str, QVariantAnimation] = {}

    def add(self, key: str, animation: Animation) -> None:
        self.remove(key)
        anim = QVariantAnimation(self)
        anim.setStartValue(float(animation.from_value))
        anim.setEndValue(float(animation.to_value))
        anim.setDuration(int(animation.duration * 1000))
        anim.setEasingCurve(QEasingCurve.Linear)
        if animation.repeats_forever:
            anim.setLoopCount(-1)
        else:
            anim.setLoopCount(max(1, int(animation.repeat_count)))
        anim.valueChanged.connect(self._on_value_changed)
        anim.finished.connect(lambda k=key, a=anim: self._on_finished(k, a))
        self._running[key] = anim
        anim.start()

    def remove(self, key: str) -> None:
        anim = self._running.pop(key, None)
        if anim is None:
            return
        anim.stop()
        anim.deleteLater()

    def is_running(self, key: str) -> bool:
        anim = self._running.get(key)
        return anim is not None and anim.state() == QAbstractAnimation.State.Running

    def presented_value(self) -> Optional[float]:
        if not self._running:
            return None
        anim = self._running[next(reversed(self._running))]
        value = anim.currentValue()
        if value is None:
            return None
        return float(value)

    def _on_value_changed(self, _value) -> None:
        if self.on_frame is not None:
            self.on_frame()

    def _on_finished(self, key: str, anim: QVariantAnimation) -> None:
        # a replaced animation may still report finished after stop()
        if self._running.get(key) is anim:
            self.remove(key)
            if self.on_frame is not None:
                self.on_frame()
