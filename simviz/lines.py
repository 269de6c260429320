"""Immediate-mode line lists that are turned into line-list mesh data."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from simviz.color import WHITE, Color
from simviz.vector import Vec3

MAX_LINES = 128000
MAX_POINTS = MAX_LINES * 2


@dataclass(frozen=True)
class Line:
    """A segment with a colour at each end."""

    start: Vec3
    end: Vec3
    start_color: Color
    end_color: Color


@dataclass
class LineMeshData:
    """Vertex attributes for a line-list mesh, two vertices per line."""

    positions: list[list[float]] = field(default_factory=list)
    normals: list[list[float]] = field(default_factory=list)
    uvs: list[list[float]] = field(default_factory=list)
    colors: list[int] = field(default_factory=list)


class Lines:
    """A bounded buffer of lines collected for a single frame."""

    def __init__(self, capacity: int = MAX_LINES) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._lines: list[Line] = []

    def line(self, start: Vec3, end: Vec3) -> None:
        """Add a white line."""
        self.line_colored(start, end, WHITE)

    def line_colored(self, start: Vec3, end: Vec3, color: Color) -> None:
        """Add a line of a single colour."""
        self.line_gradient(start, end, color, color)

    def line_gradient(
        self, start: Vec3, end: Vec3, start_color: Color, end_color: Color
    ) -> None:
        """Add a line blending from one colour to another.

        When the buffer is full the most recently added line is replaced.
        """
        if len(self._lines) == self.capacity:
            self._lines.pop()
        self._lines.append(Line(start, end, start_color, end_color))

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    def clear(self) -> None:
        """Drop all collected lines."""
        self._lines.clear()

    def generate_mesh(self, visible: bool) -> LineMeshData | None:
        """Build mesh data from the collected lines and clear the buffer.

        Returns None, without building anything, when not visible.
        """
        if not visible:
            self.clear()
            return None
        mesh = LineMeshData()
        for line in self._lines:
            mesh.positions.extend((line.start.to_list(), line.end.to_list()))
            mesh.colors.extend(
                (line.start_color.as_rgba_u32(), line.end_color.as_rgba_u32())
            )
        count = len(mesh.positions)
        mesh.normals = [[0.0, 0.0, 0.0] for _ in range(count)]
        mesh.uvs = [[0.0, 0.0] for _ in range(count)]
        self.clear()
        return mesh