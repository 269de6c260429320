"""Rod meshes: a tapered cylinder closed by a hemisphere at each end."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


class RodUvProfile(Enum):
    """How texture space is shared vertically between caps and cylinder."""

    ASPECT = "aspect"
    """By how much of the rod's length the hemispheres take up."""
    UNIFORM = "uniform"
    """By the ratio of latitudes to rings."""
    FIXED = "fixed"
    """A third each to the north cap, the cylinder and the south cap."""


@dataclass(frozen=True)
class Rod:
    """Shape parameters of a rod along the y axis."""

    ease_func: Callable[[float], float] | None = field(default=None, compare=False)
    """Easing applied when blending the radius from south to north; None is linear."""
    north_radius: float = 0.5
    south_radius: float = 0.8
    rings: int = 10
    """Sections of the cylinder between the two hemispheres."""
    depth: float = 1.0
    """Length of the cylinder on the y axis, hemispheres excluded."""
    latitudes: int = 16
    """Latitudes distributed by inclination; should be even."""
    longitudes: int = 32
    """Meridians distributed by azimuth."""
    uv_profile: RodUvProfile = RodUvProfile.UNIFORM


@dataclass
class RodMesh:
    """Triangle-list mesh data for a rod, with tangents in ``[x, y, z, w]``."""

    rod: Rod
    positions: list[list[float]]
    normals: list[list[float]]
    uvs: list[list[float]]
    tangents: list[list[float]]
    indices: list[int]

    def num_faces(self) -> int:
        """Number of triangles."""
        return len(self.indices) // 3

    def _vertex(self, face: int, vert: int) -> int:
        if not 0 <= vert < 3:
            raise IndexError("a triangle has three vertices")
        return self.indices[face * 3 + vert]

    def position(self, face: int, vert: int) -> list[float]:
        """Position of corner ``vert`` of triangle ``face``."""
        return self.positions[self._vertex(face, vert)]

    def normal(self, face: int, vert: int) -> list[float]:
        """Normal of corner ``vert`` of triangle ``face``."""
        return self.normals[self._vertex(face, vert)]

    def tex_coord(self, face: int, vert: int) -> list[float]:
        """Texture coordinate of corner ``vert`` of triangle ``face``."""
        return self.uvs[self._vertex(face, vert)]


def _sub(a: list[float], b: list[float]) -> list[float]:
    return [x - y for x, y in zip(a, b)]


def _dot(a: list[float], b: list[float]) -> float:
    return sum(x * y for x, y in zip(a, b))


def _cross(a: list[float], b: list[float]) -> list[float]:
    return [
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    ]


def _normalized(v: list[float]) -> list[float] | None:
    length = math.sqrt(_dot(v, v))
    if length < 1e-12:
        return None
    return [c / length for c in v]


def _compute_tangents(
    positions: list[list[float]],
    normals: list[list[float]],
    uvs: list[list[float]],
    indices: list[int],
) -> list[list[float]]:
    count = len(positions)
    tan = [[0.0, 0.0, 0.0] for _ in range(count)]
    bitan = [[0.0, 0.0, 0.0] for _ in range(count)]

    for a, b, c in zip(indices[0::3], indices[1::3], indices[2::3]):
        e1 = _sub(positions[b], positions[a])
        e2 = _sub(positions[c], positions[a])
        du1, dv1 = _sub(uvs[b], uvs[a])
        du2, dv2 = _sub(uvs[c], uvs[a])
        det = du1 * dv2 - du2 * dv1
        if abs(det) < 1e-12:
            continue
        r = 1.0 / det
        t = [(e1[i] * dv2 - e2[i] * dv1) * r for i in range(3)]
        s = [(e2[i] * du1 - e1[i] * du2) * r for i in range(3)]
        for v in (a, b, c):
            tan[v] = [x + y for x, y in zip(tan[v], t)]
            bitan[v] = [x + y for x, y in zip(bitan[v], s)]

    tangents = []
    for n, t, s in zip(normals, tan, bitan):
        d = _dot(n, t)
        ortho = _normalized([t[i] - n[i] * d for i in range(3)])
        if ortho is None:
            helper = [1.0, 0.0, 0.0] if abs(n[0]) < 0.9 else [0.0, 0.0, 1.0]
            ortho = _normalized(_cross(n, helper)) or [1.0, 0.0, 0.0]
        w = -1.0 if _dot(_cross(n, ortho), s) < 0.0 else 1.0
        tangents.append([*ortho, w])
    return tangents


def _quads(curr: int, nxt: int, longitudes: int) -> list[int]:
    tris: list[int] = []
    for j in range(longitudes):
        c0, c1 = curr + j, curr + j + 1
        n0, n1 = nxt + j, nxt + j + 1
        tris.extend((c0, n1, c1, c0, n0, n1))
    return tris


def build_rod_mesh(rod: Rod) -> RodMesh:
    """Generate positions, normals, UVs, tangents and indices for a rod."""
    if rod.latitudes < 4:
        raise ValueError("latitudes must be at least 4")
    if rod.longitudes < 1:
        raise ValueError("longitudes must be at least 1")
    if rod.rings < 0:
        raise ValueError("rings must not be negative")
    if rod.depth == 0:
        raise ValueError("depth must be non-zero")

    longitudes = rod.longitudes
    latitudes = rod.latitudes
    depth = rod.depth
    north_radius = rod.north_radius
    south_radius = rod.south_radius

    half_lats = latitudes // 2
    half_latsn1 = half_lats - 1
    half_latsn2 = half_lats - 2
    ringsp1 = rod.rings + 1
    lonsp1 = longitudes + 1
    half_depth = depth * 0.5
    north_summit = half_depth + north_radius
    south_summit = half_depth + south_radius

    to_theta = 2.0 * math.pi / longitudes
    to_phi = math.pi / latitudes
    to_tex_horizontal = 1.0 / longitudes
    to_tex_vertical = 1.0 / half_lats

    if rod.uv_profile is RodUvProfile.ASPECT:
        vt_aspect_ratio = 1.0 / (depth + 2.0)
    elif rod.uv_profile is RodUvProfile.UNIFORM:
        vt_aspect_ratio = half_lats / (ringsp1 + latitudes)
    else:
        vt_aspect_ratio = 1.0 / 3.0
    vt_north = 1.0 - vt_aspect_ratio
    vt_south = vt_aspect_ratio

    def weight(z: float) -> float:
        t = (z + half_depth) / depth
        if rod.ease_func is not None:
            t = rod.ease_func(t)
        return _lerp(south_radius, north_radius, t)

    thetas = [(math.cos(j * to_theta), math.sin(j * to_theta)) for j in range(longitudes)]
    # One column per longitude plus a seam column that repeats the first angle.
    columns = [
        (1.0 - j * to_tex_horizontal, *thetas[j % longitudes]) for j in range(lonsp1)
    ]

    positions: list[list[float]] = []
    normals: list[list[float]] = []
    uvs: list[list[float]] = []

    def add(pos: list[float], uv: list[float], normal: list[float]) -> None:
        positions.append(pos)
        uvs.append(uv)
        normals.append(normal)

    def cap(y: float, v: float, ny: float) -> None:
        for j in range(longitudes):
            add([0.0, y, 0.0], [1.0 - (j + 0.5) * to_tex_horizontal, v], [0.0, ny, 0.0])

    def ring(y: float, v: float, radius: float) -> None:
        for s, cx, sy in columns:
            add([cx * radius, y, -sy * radius], [s, v], [cx, 0.0, -sy])

    def hemisphere_rows(north: bool) -> None:
        for i in range(half_latsn1):
            ip1 = i + 1.0
            phi = ip1 * to_phi
            t_fac = ip1 * to_tex_vertical
            cmpl = 1.0 - t_fac
            if north:
                cos_phi, sin_phi = math.sin(phi), -math.cos(phi)
                z = half_depth - sin_phi * north_radius
                v = cmpl + vt_north * t_fac
            else:
                cos_phi, sin_phi = math.cos(phi), math.sin(phi)
                z = -half_depth - sin_phi * south_radius
                v = cmpl * vt_south
            w = weight(z)
            for s, cx, sy in columns:
                add(
                    [cos_phi * cx * w, z, -cos_phi * sy * w],
                    [s, v],
                    [cos_phi * cx, -sin_phi, -cos_phi * sy],
                )

    cap(north_summit, 1.0, 1.0)
    hemisphere_rows(north=True)
    ring(half_depth, vt_north, north_radius)
    for h in range(1, ringsp1):
        fac = h / ringsp1
        z = half_depth - depth * fac
        v = (1.0 - fac) * vt_north + fac * vt_south
        ring(z, v, weight(z))
    ring(-half_depth, vt_south, south_radius)
    hemisphere_rows(north=False)
    cap(-south_summit, 0.0, -1.0)

    off_north_hemi = longitudes
    off_north_equator = off_north_hemi + lonsp1 * half_latsn1
    off_south_equator = off_north_equator + lonsp1 + lonsp1 * rod.rings
    off_south_hemi = off_south_equator + lonsp1
    off_south_polar = off_south_hemi + lonsp1 * half_latsn2
    off_south_cap = off_south_polar + lonsp1

    indices: list[int] = []
    for i in range(longitudes):
        indices.extend((i, off_north_hemi + i, off_north_hemi + i + 1))
    for i in range(half_latsn1):
        curr = off_north_hemi + i * lonsp1
        indices.extend(_quads(curr, curr + lonsp1, longitudes))
    for i in range(ringsp1):
        curr = off_north_equator + i * lonsp1
        indices.extend(_quads(curr, curr + lonsp1, longitudes))
    for i in range(half_latsn1):
        curr = off_south_equator + i * lonsp1
        indices.extend(_quads(curr, curr + lonsp1, longitudes))
    for i in range(longitudes):
        indices.extend(
            (off_south_cap + i, off_south_polar + i + 1, off_south_polar + i)
        )

    assert len(positions) == off_south_cap + longitudes

    tangents = _compute_tangents(positions, normals, uvs, indices)
    return RodMesh(
        rod=rod,
        positions=positions,
        normals=normals,
        uvs=uvs,
        tangents=tangents,
        indices=indices,
    )