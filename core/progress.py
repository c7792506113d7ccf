from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from .animation import Animation, AnimationEngine
from .arc import PieSlice, render_pie
from .config import (
    DEFAULT_TINT,
    PROGRESS_DECIMALS,
    PROGRESS_KEY,
    SPIN_DURATION,
    SPIN_KEY,
    TRANSITION_DURATION,
    TRANSITION_STEP,
)

log = logging.getLogger(__name__)


def normalize_progress(value: float) -> float:
    """Floor negatives to 0, then wrap into [0, 1)."""
    safe = max(0.0, float(value))
    if not math.isfinite(safe):
        return 0.0
    return math.fmod(safe, 1.0)


class ProgressIndicator:
    """Progress state and spin/stop state machine for the pie indicator.

    Drawing is requested through ``request_redraw``; the host decides when
    the actual repaint happens. All timing belongs to the animation engine.
    """

    def __init__(self, engine: AnimationEngine,
                 request_redraw: Optional[Callable[[], None]] = None) -> None:
        if not isinstance(engine, AnimationEngine):
            raise TypeError(f"{type(engine).__name__} is not an animation engine")
        self._engine = engine
        self._request_redraw = request_redraw
        self._progress = 0.0
        self._tint = DEFAULT_TINT
        self._spinning = False

    @property
    def progress(self) -> float:
        return self._progress

    def get_progress(self) -> float:
        return self._progress

    @property
    def resting_progress(self) -> float:
        return self._progress

    @property
    def presented_progress(self) -> float:
        value = self._engine.presented_value()
        if value is None:
            return self._progress
        return value

    @property
    def tint_color(self) -> str:
        return self._tint

    @property
    def spinning(self) -> bool:
        return self._spinning

    def _redraw(self) -> None:
        if self._request_redraw is not None:
            self._request_redraw()

    def set_progress(self, value: float) -> None:
        self._progress = normalize_progress(value)
        if not self._spinning:
            self._engine.remove(PROGRESS_KEY)
        self._redraw()

    def set_progress_animated(self, value: float) -> None:
        start = self.presented_progress
        self._progress = normalize_progress(value)
        if not self._spinning:
            self._engine.add(PROGRESS_KEY, Animation(
                from_value=start,
                to_value=self._progress,
                duration=TRANSITION_DURATION,
                by_value=TRANSITION_STEP,
            ))
        self._redraw()

    def advance(self, step: float) -> None:
        value = round(self._progress + step, PROGRESS_DECIMALS)
        if value >= 1.0:
            value = 0.0
        self.set_progress_animated(value)

    def set_tint_color(self, color: Optional[str]) -> None:
        self._tint = color or DEFAULT_TINT
        self._redraw()

    def spin(self) -> None:
        if self._spinning:
            log.debug("spin() ignored, already spinning")
            return
        self._engine.remove(PROGRESS_KEY)
        self._engine.add(SPIN_KEY, Animation(
            from_value=0.0,
            to_value=1.0,
            duration=SPIN_DURATION,
            repeat_count=math.inf,
            by_value=TRANSITION_STEP,
        ))
        self._spinning = True
        log.debug("spinning started")

    def stop(self) -> None:
        if not self._spinning:
            return
        # keep what is on screen instead of snapping back to the old resting value
        current = self._engine.presented_value()
        if current is not None:
            self._progress = normalize_progress(current)
        self._engine.remove(SPIN_KEY)
        self._spinning = False
        log.debug("spinning stopped at %.3f", self._progress)
        self._redraw()

    def render(self, width: float, height: float) -> PieSlice:
        return render_pie(self.presented_progress, self._tint, width, height)
