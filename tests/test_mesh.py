import pytest

from minengine.mesh import Mesh, Texture, Vertex


def _quad():
    vertices = [
        Vertex((0, 0, 0), (0, 0, 1), (0, 0)),
        Vertex((1, 0, 0), (0, 0, 1), (1, 0)),
        Vertex((1, 1, 0), (0, 0, 1), (1, 1)),
        Vertex((0, 1, 0), (0, 0, 1), (0, 1)),
    ]
    return Mesh(vertices, [0, 1, 2, 2, 3, 0])


def test_vertex_data_interleaves_eight_floats():
    mesh = _quad()
    data = mesh.vertex_data()
    assert len(data) == 8 * len(mesh.vertices)
    for position, vertex in enumerate(mesh.vertices):
        chunk = data[8 * position: 8 * position + 8]
        assert tuple(chunk[0:3]) == vertex.position
        assert tuple(chunk[3:6]) == vertex.normal
        assert tuple(chunk[6:8]) == vertex.tex_coords


def test_vertex_defaults_to_zero_attributes():
    vertex = Vertex((1, 2, 3))
    assert vertex.tex_coords == (0.0, 0.0)
    assert vertex.tangent == (0.0, 0.0, 0.0)
    assert vertex.position == (1.0, 2.0, 3.0)


def test_vertex_rejects_wrong_size():
    with pytest.raises(ValueError):
        Vertex((1, 2))
    with pytest.raises(ValueError):
        Vertex((1, 2, 3), tex_coords=(0, 0, 0))


def test_index_count_and_triangles():
    mesh = _quad()
    assert mesh.index_count == len(mesh.indices)
    assert mesh.triangles() == [(0, 1, 2), (2, 3, 0)]


def test_indices_out_of_range_rejected():
    with pytest.raises(ValueError):
        Mesh([Vertex((0, 0, 0))], [0, 1, 0])


def test_sampler_bindings_number_per_kind():
    textures = [
        Texture(11, "a.png", "texture_diffuse"),
        Texture(12, "b.png", "texture_specular"),
        Texture(13, "c.png", "texture_diffuse"),
        Texture(14, "d.png", "texture_normal"),
        Texture(15, "e.png", "texture_height"),
    ]
    mesh = Mesh([Vertex((0, 0, 0))], [0, 0, 0], textures)
    assert mesh.sampler_bindings() == [
        ("texture_diffuse1", 0, 11),
        ("texture_specular1", 1, 12),
        ("texture_diffuse2", 2, 13),
        ("texture_normal1", 3, 14),
        ("texture_height1", 4, 15),
    ]


def test_unknown_sampler_kind_keeps_bare_name():
    mesh = Mesh([Vertex((0, 0, 0))], [], [Texture(7, "x.png", "custom")])
    assert mesh.sampler_bindings() == [("custom", 0, 7)]


def test_no_textures_no_bindings():
    assert _quad().sampler_bindings() == []