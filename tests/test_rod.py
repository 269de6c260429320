import math

import pytest

from simviz.rod import Rod, RodMesh, RodUvProfile, build_rod_mesh


def _length(v):
    return math.sqrt(sum(c * c for c in v))


@pytest.fixture
def default_mesh():
    return build_rod_mesh(Rod())


def test_rod_defaults():
    rod = Rod()
    assert rod.north_radius == 0.5
    assert rod.south_radius == 0.8
    assert rod.rings == 10
    assert rod.depth == 1.0
    assert rod.latitudes == 16
    assert rod.longitudes == 32
    assert rod.uv_profile is RodUvProfile.UNIFORM


def test_attribute_lengths_match(default_mesh):
    n = len(default_mesh.positions)
    assert len(default_mesh.normals) == n
    assert len(default_mesh.uvs) == n
    assert len(default_mesh.tangents) == n
    assert len(default_mesh.indices) % 3 == 0
    assert default_mesh.num_faces() == len(default_mesh.indices) // 3


def test_indices_in_range_and_all_vertices_used(default_mesh):
    n = len(default_mesh.positions)
    assert all(0 <= i < n for i in default_mesh.indices)
    assert set(default_mesh.indices) == set(range(n))


def test_summits():
    rod = Rod(north_radius=0.4, south_radius=0.7, depth=2.0)
    mesh = build_rod_mesh(rod)
    ys = [p[1] for p in mesh.positions]
    assert max(ys) == pytest.approx(1.0 + 0.4)
    assert min(ys) == pytest.approx(-(1.0 + 0.7))
    assert mesh.positions[0] == [0.0, pytest.approx(1.4), 0.0]


def test_normals_are_unit(default_mesh):
    for n in default_mesh.normals:
        assert _length(n) == pytest.approx(1.0, abs=1e-9)


def test_uvs_in_unit_square(default_mesh):
    for u, v in default_mesh.uvs:
        assert 0.0 <= u <= 1.0
        assert 0.0 <= v <= 1.0


def test_tangents_orthonormal_with_handedness(default_mesh):
    for t, n in zip(default_mesh.tangents, default_mesh.normals):
        assert t[3] in (1.0, -1.0)
        assert _length(t[:3]) == pytest.approx(1.0, abs=1e-9)
        assert abs(sum(a * b for a, b in zip(t[:3], n))) < 1e-9


def test_face_accessors(default_mesh):
    face = 5
    for vert in range(3):
        idx = default_mesh.indices[face * 3 + vert]
        assert default_mesh.position(face, vert) == default_mesh.positions[idx]
        assert default_mesh.normal(face, vert) == default_mesh.normals[idx]
        assert default_mesh.tex_coord(face, vert) == default_mesh.uvs[idx]


def test_face_accessor_rejects_bad_corner(default_mesh):
    with pytest.raises(IndexError):
        default_mesh.position(0, 3)


def _equator_vs(mesh, y):
    return {
        round(uv[1], 9)
        for p, n, uv in zip(mesh.positions, mesh.normals, mesh.uvs)
        if n[1] == 0.0 and p[1] == pytest.approx(y)
    }


def test_fixed_profile_equator_uvs():
    mesh = build_rod_mesh(Rod(uv_profile=RodUvProfile.FIXED, rings=0))
    assert _equator_vs(mesh, 0.5) == {round(2.0 / 3.0, 9)}
    assert _equator_vs(mesh, -0.5) == {round(1.0 / 3.0, 9)}


def test_aspect_profile_equator_uvs():
    mesh = build_rod_mesh(Rod(uv_profile=RodUvProfile.ASPECT, depth=2.0, rings=0))
    assert _equator_vs(mesh, 1.0) == {0.75}
    assert _equator_vs(mesh, -1.0) == {0.25}


def test_equator_radii():
    rod = Rod(north_radius=0.3, south_radius=0.9, rings=0)
    mesh = build_rod_mesh(rod)
    for p, n in zip(mesh.positions, mesh.normals):
        if n[1] != 0.0:
            continue
        radius = math.hypot(p[0], p[2])
        if p[1] == pytest.approx(0.5):
            assert radius == pytest.approx(0.3)
        else:
            assert p[1] == pytest.approx(-0.5)
            assert radius == pytest.approx(0.9)


def test_ease_function_controls_cylinder_radius():
    rod = Rod(north_radius=0.5, south_radius=0.8, rings=3, ease_func=lambda t: 1.0)
    mesh = build_rod_mesh(rod)
    cylinder = [
        p for p, n in zip(mesh.positions, mesh.normals)
        if n[1] == 0.0 and abs(p[1]) < 0.5 - 1e-9
    ]
    assert len(cylinder) == 3 * 33
    for p in cylinder:
        assert math.hypot(p[0], p[2]) == pytest.approx(0.5)


def test_seam_column_repeats_first_position():
    mesh = build_rod_mesh(Rod(longitudes=8, latitudes=4, rings=0))
    # North equator row starts after the cap and one hemisphere row.
    start = 8 + 9
    first, seam = mesh.positions[start], mesh.positions[start + 8]
    assert seam == pytest.approx(first)
    assert mesh.uvs[start][0] == pytest.approx(1.0)
    assert mesh.uvs[start + 8][0] == pytest.approx(0.0)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"latitudes": 2},
        {"longitudes": 0},
        {"depth": 0.0},
        {"rings": -1},
    ],
)
def test_invalid_rods_raise(kwargs):
    with pytest.raises(ValueError):
        build_rod_mesh(Rod(**kwargs))


def test_mesh_keeps_rod():
    rod = Rod(rings=2)
    mesh = build_rod_mesh(rod)
    assert isinstance(mesh, RodMesh)
    assert mesh.rod == rod