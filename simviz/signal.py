"""Scrolling plots of signal and controller values drawn as lines."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from simviz.color import Color
from simviz.lines import Lines
from simviz.vector import Vec3


@dataclass
class SignalLine:
    """A polyline whose y values scroll left as new samples arrive."""

    points: list[Vec3]

    def __post_init__(self) -> None:
        if not self.points:
            raise ValueError("a signal line needs at least one point")
        self.points = list(self.points)

    def shift(self, value: float) -> None:
        """Move every y value one point left and put ``value`` at the end."""
        ys = [point.y for point in self.points[1:]] + [value]
        self.points = [point.with_y(y) for point, y in zip(self.points, ys)]

    def last_y(self) -> float:
        """The most recent sample."""
        return self.points[-1].y

    def draw(self, lines: Lines, color: Color) -> None:
        """Add one segment between each pair of neighbouring points."""
        for start, end in zip(self.points, self.points[1:]):
            lines.line_colored(start, end, color)


def _plot_color(hue: float) -> Color:
    return Color.hsla(hue, 1.0, 0.5, 1.0)


def draw_signal_lines(
    signals: Sequence[tuple[float, SignalLine, Lines]], start_hue: float = 0.0
) -> None:
    """Push a new sample into each signal line and draw it.

    Each entry is ``(sample, signal_line, lines)``. Hues are spread evenly
    around the colour wheel starting at ``start_hue``.
    """
    if not signals:
        return
    hue_step = 360.0 / len(signals)
    for index, (sample, signal_line, lines) in enumerate(signals):
        signal_line.shift(sample)
        signal_line.draw(lines, _plot_color(start_hue + hue_step * index))


def draw_control_lines(
    signals: Sequence[
        tuple[Callable[[float, float], float], SignalLine, SignalLine, Lines]
    ],
    start_hue: float = 100.0,
) -> None:
    """Advance each controller plot by one step and draw it.

    Each entry is ``(controller, signal_line, control_line, lines)``; the
    controller receives the latest target and current values and returns the
    correction added to the current value.
    """
    if not signals:
        return
    hue_step = 360.0 / len(signals)
    for index, (controller, signal_line, control_line, lines) in enumerate(signals):
        current = control_line.last_y()
        control = controller(signal_line.last_y(), current)
        control_line.shift(current + control)
        control_line.draw(lines, _plot_color(start_hue + hue_step * index))