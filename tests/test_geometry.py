import numpy as np

from glscene.geometry import cube_vertices, floor_indices, floor_vertices


def test_cube_has_36_interleaved_vertices():
    vertices = cube_vertices()
    assert vertices.shape == (36, 8)
    assert vertices.dtype == np.float32


def test_cube_positions_lie_on_their_face():
    vertices = cube_vertices()
    positions = vertices[:, :3]
    normals = vertices[:, 3:6]
    np.testing.assert_allclose(np.sum(positions * normals, axis=1), 0.5)


def test_cube_normals_are_unit_and_constant_per_face():
    normals = cube_vertices()[:, 3:6].reshape(6, 6, 3)
    np.testing.assert_allclose(np.linalg.norm(normals, axis=2), 1.0)
    for face in normals:
        assert (face == face[0]).all()
    distinct = {tuple(face[0]) for face in normals}
    assert len(distinct) == 6


def test_cube_uses_eight_corners_and_valid_texcoords():
    vertices = cube_vertices()
    corners = {tuple(row) for row in vertices[:, :3]}
    assert len(corners) == 8
    texcoords = vertices[:, 6:]
    assert texcoords.min() >= 0.0
    assert texcoords.max() <= 1.0


def test_cube_vertices_returns_fresh_array():
    first = cube_vertices()
    first[:] = 0
    assert cube_vertices()[0, 0] == np.float32(-0.5)


def test_floor_with_normals_layout():
    vertices = floor_vertices(True)
    assert vertices.shape == (4, 8)
    np.testing.assert_array_equal(vertices[:, 3:6], np.tile([0.0, 0.0, 1.0], (4, 1)))
    np.testing.assert_array_equal(vertices[:, 2], np.zeros(4))


def test_floor_without_normals_matches_positions_and_texcoords():
    plain = floor_vertices(False)
    full = floor_vertices(True)
    assert plain.shape == (4, 5)
    np.testing.assert_array_equal(plain[:, :3], full[:, :3])
    np.testing.assert_array_equal(plain[:, 3:], full[:, 6:])


def test_floor_default_has_normals():
    assert floor_vertices().shape == floor_vertices(True).shape


def test_floor_indices():
    indices = floor_indices()
    assert indices.dtype == np.uint32
    assert indices.tolist() == [0, 1, 2, 1, 2, 3]
    assert indices.max() < len(floor_vertices())