"""Coloured axis gizmo drawn into a line buffer."""

from __future__ import annotations

from dataclasses import dataclass

from simviz.color import BLUE, GREEN, RED
from simviz.lines import Lines
from simviz.vector import Vec3, forward, right, up


@dataclass
class Axes:
    """Three axis lines of a given length, optionally starting off-centre."""

    size: float = 1.0
    inner_offset: float = 0.0

    def draw(self, lines: Lines, visible: bool = True) -> None:
        """Add the forward (blue), right (red) and up (green) axis lines."""
        if not visible:
            return
        origin = Vec3()
        for direction, color in ((forward(), BLUE), (right(), RED), (up(), GREEN)):
            start = origin + direction * self.inner_offset
            end = start + direction * self.size
            lines.line_colored(start, end, color)