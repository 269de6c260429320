"""Axis-aligned voxel cubes and their merged triangle mesh data."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from simviz.color import Color
from simviz.vector import Vec3


def _default_voxel_color() -> Color:
    return Color.rgba(1.0, 0.1, 1.0, 1.0)


@dataclass(frozen=True)
class Voxel:
    """A cube of edge ``size`` centred at ``position``."""

    position: Vec3 = field(default_factory=Vec3)
    size: float = 1.0
    color: Color = field(default_factory=_default_voxel_color)


@dataclass(frozen=True)
class VoxelBox:
    """An axis-aligned box given by its extents on each axis."""

    min_x: float = -1.0
    max_x: float = 1.0
    min_y: float = -0.5
    max_y: float = 0.5
    min_z: float = -0.5
    max_z: float = 0.5
    color: Color = field(default_factory=_default_voxel_color)

    @classmethod
    def centered(
        cls, x_length: float, y_length: float, z_length: float, color: Color
    ) -> VoxelBox:
        """A box of the given lengths centred on the origin."""
        return cls(
            min_x=-x_length / 2.0,
            max_x=x_length / 2.0,
            min_y=-y_length / 2.0,
            max_y=y_length / 2.0,
            min_z=-z_length / 2.0,
            max_z=z_length / 2.0,
            color=color,
        )

    @classmethod
    def from_voxel(cls, voxel: Voxel) -> VoxelBox:
        """The box occupied by a voxel."""
        base = cls.centered(voxel.size, voxel.size, voxel.size, voxel.color)
        p = voxel.position
        return cls(
            min_x=base.min_x + p.x,
            max_x=base.max_x + p.x,
            min_y=base.min_y + p.y,
            max_y=base.max_y + p.y,
            min_z=base.min_z + p.z,
            max_z=base.max_z + p.z,
            color=voxel.color,
        )


_BOX_INDICES = [
    0, 1, 2, 2, 3, 0,  # front
    4, 5, 6, 6, 7, 4,  # back
    8, 9, 10, 10, 11, 8,  # right
    12, 13, 14, 14, 15, 12,  # left
    16, 17, 18, 18, 19, 16,  # up
    20, 21, 22, 22, 23, 20,  # bottom
]


@dataclass
class VoxelsMesh:
    """Triangle-list vertex attributes and indices."""

    positions: list[list[float]] = field(default_factory=list)
    normals: list[list[float]] = field(default_factory=list)
    colors: list[int] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    @classmethod
    def from_box(cls, box: VoxelBox) -> VoxelsMesh:
        """Four vertices and two triangles for each of the six faces."""
        x0, x1 = box.min_x, box.max_x
        y0, y1 = box.min_y, box.max_y
        z0, z1 = box.min_z, box.max_z
        faces = [
            ([0.0, 0.0, -1.0], [[x0, y0, z1], [x1, y0, z1], [x1, y1, z1], [x0, y1, z1]]),
            ([0.0, 0.0, 1.0], [[x0, y1, z0], [x1, y1, z0], [x1, y0, z0], [x0, y0, z0]]),
            ([1.0, 0.0, 0.0], [[x1, y0, z0], [x1, y1, z0], [x1, y1, z1], [x1, y0, z1]]),
            ([-1.0, 0.0, 0.0], [[x0, y0, z1], [x0, y1, z1], [x0, y1, z0], [x0, y0, z0]]),
            ([0.0, 1.0, 0.0], [[x1, y1, z0], [x0, y1, z0], [x0, y1, z1], [x1, y1, z1]]),
            ([0.0, -1.0, 0.0], [[x1, y0, z1], [x0, y0, z1], [x0, y0, z0], [x1, y0, z0]]),
        ]
        color = box.color.as_rgba_u32()
        positions = [corner for _, corners in faces for corner in corners]
        normals = [list(normal) for normal, corners in faces for _ in corners]
        return cls(
            positions=positions,
            normals=normals,
            colors=[color] * len(positions),
            indices=list(_BOX_INDICES),
        )

    @classmethod
    def from_voxel(cls, voxel: Voxel) -> VoxelsMesh:
        """Mesh for a single voxel."""
        return cls.from_box(VoxelBox.from_voxel(voxel))

    def extend(self, other: VoxelsMesh) -> None:
        """Append another mesh, offsetting its indices past existing vertices."""
        offset = len(self.positions)
        self.positions.extend(list(p) for p in other.positions)
        self.normals.extend(list(n) for n in other.normals)
        self.colors.extend(other.colors)
        self.indices.extend(i + offset for i in other.indices)

    def uvs(self) -> list[list[float]]:
        """Zero texture coordinates, one per vertex."""
        return [[0.0, 0.0] for _ in self.positions]


def merge(voxels: Iterable[Voxel]) -> VoxelsMesh:
    """Combine the meshes of all voxels into one."""
    mesh = VoxelsMesh()
    for voxel in voxels:
        mesh.extend(VoxelsMesh.from_voxel(voxel))
    return mesh