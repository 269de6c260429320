from simviz.color import Color
from simviz.vector import Vec3
from simviz.voxels import Voxel, VoxelBox, VoxelsMesh, merge


def test_voxel_defaults():
    voxel = Voxel()
    assert voxel.position == Vec3()
    assert voxel.size == 1.0
    assert voxel.color == Color.rgba(1.0, 0.1, 1.0, 1.0)


def test_box_centered():
    color = Color.rgb(0.5, 0.5, 0.5)
    box = VoxelBox.centered(2.0, 4.0, 6.0, color)
    assert (box.min_x, box.max_x) == (-1.0, 1.0)
    assert (box.min_y, box.max_y) == (-2.0, 2.0)
    assert (box.min_z, box.max_z) == (-3.0, 3.0)
    assert box.color == color


def test_default_box_matches_centered():
    assert VoxelBox() == VoxelBox.centered(2.0, 1.0, 1.0, Color.rgba(1.0, 0.1, 1.0, 1.0))


def test_box_from_voxel_is_offset():
    voxel = Voxel(Vec3(6.0, 1.0, -2.0), 0.5, Color.rgb(1.0, 0.0, 0.0))
    box = VoxelBox.from_voxel(voxel)
    assert (box.min_x, box.max_x) == (6.0 - 0.25, 6.0 + 0.25)
    assert (box.min_y, box.max_y) == (1.0 - 0.25, 1.0 + 0.25)
    assert (box.min_z, box.max_z) == (-2.0 - 0.25, -2.0 + 0.25)
    assert box.color == voxel.color


def test_box_mesh_shape():
    color = Color.rgb(0.0, 1.0, 0.0)
    mesh = VoxelsMesh.from_box(VoxelBox.centered(1.0, 1.0, 1.0, color))
    assert len(mesh.positions) == 24
    assert len(mesh.normals) == 24
    assert len(mesh.indices) == 36
    assert mesh.colors == [color.as_rgba_u32()] * 24
    assert set(mesh.indices) == set(range(24))


def test_box_mesh_vertices_on_box_corners():
    box = VoxelBox.centered(2.0, 4.0, 6.0, Color.rgb(1.0, 1.0, 1.0))
    mesh = VoxelsMesh.from_box(box)
    for x, y, z in mesh.positions:
        assert x in (box.min_x, box.max_x)
        assert y in (box.min_y, box.max_y)
        assert z in (box.min_z, box.max_z)
    assert mesh.normals[:4] == [[0.0, 0.0, -1.0]] * 4
    assert all(p[2] == box.max_z for p in mesh.positions[:4])


def test_uvs_are_zero_per_vertex():
    mesh = VoxelsMesh.from_voxel(Voxel())
    assert mesh.uvs() == [[0.0, 0.0]] * len(mesh.positions)


def test_extend_offsets_indices():
    mesh = VoxelsMesh.from_voxel(Voxel())
    other = VoxelsMesh.from_voxel(Voxel(position=Vec3(3.0, 0.0, 0.0)))
    mesh.extend(other)
    assert len(mesh.positions) == 48
    assert mesh.indices[36:] == [i + 24 for i in other.indices]
    assert mesh.positions[24:] == other.positions


def test_merge_many_voxels():
    voxels = [
        Voxel(Vec3(6.0, 0.0, 0.0), 0.5, Color.rgb(1.0, 0.0, 0.0).with_alpha(0.1)),
        Voxel(Vec3(0.0, 6.0, 0.0), 0.5, Color.rgb(0.0, 1.0, 0.0).with_alpha(0.1)),
        Voxel(Vec3(0.0, 0.0, -6.0), 0.5, Color.rgb(0.0, 0.0, 1.0).with_alpha(0.1)),
    ]
    mesh = merge(voxels)
    assert len(mesh.positions) == 3 * 24
    assert len(mesh.indices) == 3 * 36
    assert max(mesh.indices) == len(mesh.positions) - 1
    assert mesh.colors[24] == voxels[1].color.as_rgba_u32()


def test_merge_empty():
    mesh = merge([])
    assert mesh.positions == []
    assert mesh.indices == []