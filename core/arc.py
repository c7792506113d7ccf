from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .config import DEFAULT_TINT, RADIUS_INSET

# 12 o'clock in screen coordinates (y grows downward)
START_ANGLE = -math.pi / 2.0

Point = Tuple[float, float]


@dataclass(frozen=True)
class PieSlice:
    """Filled pie slice, angles in radians, positive sweep = clockwise on screen."""

    center: Point
    radius: float
    start_angle: float
    sweep: float
    fill: str
    commands: Tuple[tuple, ...]

    @property
    def end_point(self) -> Point:
        return _point_on_circle(self.center, self.radius, self.start_angle + self.sweep)

    @property
    def area(self) -> float:
        return 0.5 * self.radius * self.radius * self.sweep

    @property
    def is_degenerate(self) -> bool:
        return self.sweep <= 0.0 or self.radius <= 0.0


def _point_on_circle(center: Point, radius: float, angle: float) -> Point:
    return (center[0] + radius * math.cos(angle), center[1] + radius * math.sin(angle))


def render_pie(progress: float, fill: Optional[str], width: float, height: float) -> PieSlice:
    center = (width / 2.0, height / 2.0)
    radius = (width * RADIUS_INSET) / 2.0  # inset slightly
    sweep = 2.0 * math.pi * progress
    color = fill or DEFAULT_TINT

    start = _point_on_circle(center, radius, START_ANGLE)
    commands = (
        ("move_to", center[0], center[1]),
        ("line_to", start[0], start[1]),
        ("arc", center[0], center[1], radius, START_ANGLE, START_ANGLE + sweep),
        ("close",),
    )
    return PieSlice(center=center, radius=radius, start_angle=START_ANGLE,
                    sweep=sweep, fill=color, commands=commands)


def polygon_points(pie: PieSlice, segments: int = 128) -> np.ndarray:
    """Tessellate the slice for rasterizers without an arc primitive.

    Returns an (n, 2) array starting at the center. The number of arc
    vertices scales with the sweep so short slices stay cheap.
    """
    n = max(2, int(math.ceil(segments * pie.sweep / (2.0 * math.pi))) + 1)
    angles = np.linspace(pie.start_angle, pie.start_angle + pie.sweep, n)
    xs = pie.center[0] + pie.radius * np.cos(angles)
    ys = pie.center[1] + pie.radius * np.sin(angles)
    arc = np.column_stack((xs, ys))
    return np.vstack((np.asarray([pie.center], dtype=np.float64), arc))
