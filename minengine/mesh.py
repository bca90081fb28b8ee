"""Mesh data: vertices, triangle indices and the textures sampled when drawing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]

_NUMBERED_SAMPLERS = ("texture_diffuse", "texture_specular", "texture_normal", "texture_height")


def _vector(values: Iterable[float], size: int, label: str) -> tuple[float, ...]:
    result = tuple(float(v) for v in values)
    if len(result) != size:
        raise ValueError(f"{label} needs {size} components, got {len(result)}")
    return result


@dataclass(frozen=True)
class Vertex:
    """One mesh vertex with its shading attributes."""

    position: Vec3
    normal: Vec3 = (0.0, 0.0, 0.0)
    tex_coords: Vec2 = (0.0, 0.0)
    tangent: Vec3 = (0.0, 0.0, 0.0)
    bitangent: Vec3 = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        for name, size in (
            ("position", 3),
            ("normal", 3),
            ("tex_coords", 2),
            ("tangent", 3),
            ("bitangent", 3),
        ):
            object.__setattr__(self, name, _vector(getattr(self, name), size, name))


@dataclass(frozen=True)
class Texture:
    """A loaded texture: its handle, source path and sampler kind."""

    id: int
    path: str
    type: str


@dataclass
class Mesh:
    """Vertices, triangle indices and textures of one drawable mesh."""

    vertices: list[Vertex]
    indices: list[int]
    textures: list[Texture] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.vertices = list(self.vertices)
        self.indices = [int(i) for i in self.indices]
        self.textures = list(self.textures)
        bad = [i for i in self.indices if not 0 <= i < len(self.vertices)]
        if bad:
            raise ValueError(f"indices out of range: {bad}")

    @property
    def index_count(self) -> int:
        """Number of indices drawn."""
        return len(self.indices)

    def vertex_data(self) -> list[float]:
        """Interleaved position, normal and texture coordinates, 8 floats per vertex."""
        return [
            component
            for vertex in self.vertices
            for component in (*vertex.position, *vertex.normal, *vertex.tex_coords)
        ]

    def sampler_bindings(self) -> list[tuple[str, int, int]]:
        """Return ``(uniform name, texture unit, texture id)`` for each texture.

        Known sampler kinds are numbered from 1 per kind (``texture_diffuse1``,
        ``texture_diffuse2`` ...); other kinds keep their bare name.
        """
        counters = dict.fromkeys(_NUMBERED_SAMPLERS, 0)
        bindings = []
        for unit, texture in enumerate(self.textures):
            name = texture.type
            if name in counters:
                counters[name] += 1
                name = f"{name}{counters[name]}"
            bindings.append((name, unit, texture.id))
        return bindings

    def triangles(self) -> Sequence[tuple[int, int, int]]:
        """Group the indices into triangles."""
        it = iter(self.indices)
        return list(zip(it, it, it))