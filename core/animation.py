from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class Animation:
    from_value: float
    to_value: float
    duration: float
    repeat_count: float = 1
    by_value: Optional[float] = None
    timing: str = "linear"

    @property
    def repeats_forever(self) -> bool:
        return math.isinf(self.repeat_count)

    def finished_at(self, elapsed: float) -> bool:
        if self.repeats_forever:
            return False
        return elapsed >= self.duration * self.repeat_count

    def value_at(self, elapsed: float) -> float:
        if self.duration <= 0:
            return self.to_value
        if self.finished_at(elapsed):
            return self.to_value
        frac = (elapsed % self.duration) / self.duration
        return self.from_value + (self.to_value - self.from_value) * frac


@runtime_checkable
class AnimationEngine(Protocol):
    def add(self, key: str, animation: Animation) -> None: ...

    def remove(self, key: str) -> None: ...

    def presented_value(self) -> Optional[float]: ...


class ManualAnimationEngine:
    """Engine advanced explicitly with tick(); no clock of its own."""

    def __init__(self, on_frame: Optional[Callable[[], None]] = None) -> None:
        self.on_frame = on_frame
        # insertion order doubles as stacking order, last one is on top
        self._running: Dict[str, Animation] = {}
        self._elapsed: Dict[str, float] = {}

    def add(self, key: str, animation: Animation) -> None:
        self._running.pop(key, None)
        self._running[key] = animation
        self._elapsed[key] = 0.0

    def remove(self, key: str) -> None:
        self._running.pop(key, None)
        self._elapsed.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._running)

    def presented_value(self) -> Optional[float]:
        if not self._running:
            return None
        key = next(reversed(self._running))
        return self._running[key].value_at(self._elapsed[key])

    def tick(self, dt: float) -> None:
        if not self._running:
            return
        finished = []
        for key, anim in self._running.items():
            self._elapsed[key] += dt
            if anim.finished_at(self._elapsed[key]):
                finished.append(key)
        for key in finished:
            self.remove(key)
        if self.on_frame is not None:
            self.on_frame()
