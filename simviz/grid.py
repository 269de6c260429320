"""Square ground grid on the XZ plane drawn into a line buffer."""

from __future__ import annotations

from dataclasses import dataclass, field

from simviz.color import Color
from simviz.lines import Lines
from simviz.vector import Vec3


def _default_grid_color() -> Color:
    return Color.rgb(0.025, 0.02, 0.03)


@dataclass
class Grid:
    """A grid of ``size`` units split into ``divisions`` cells per side."""

    size: int = 10
    divisions: int = 10
    start_color: Color = field(default_factory=_default_grid_color)
    end_color: Color = field(default_factory=_default_grid_color)

    def draw(self, lines: Lines, visible: bool = True) -> None:
        """Add the grid lines; the centre lines are drawn brighter."""
        if not visible:
            return
        if self.divisions <= 0:
            raise ValueError("divisions must be positive")
        center = self.divisions // 2
        step = self.size // self.divisions
        half_size = self.size // 2
        if step == 0:
            return

        offsets = range(-half_size, half_size + 1, step)
        for i, k in zip(range(self.divisions + 1), offsets):
            start_color = self.start_color
            if i == center:
                start_color = start_color + start_color * 0.3

            lines.line_gradient(
                Vec3(-half_size, 0.0, k),
                Vec3(half_size, 0.0, k),
                start_color,
                self.end_color,
            )
            lines.line_gradient(
                Vec3(k, 0.0, -half_size),
                Vec3(k, 0.0, half_size),
                start_color,
                self.end_color,
            )