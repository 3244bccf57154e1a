"""Materials, rays, spheres, triangle meshes and their intersection tests."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .texture import Texture
from .utils import PI
from .vectors import Vec2, Vec3

EPSILON = 1e-6
FLT_MAX = 3.4028234663852886e38

_log = logging.getLogger(__name__)

_FACE_VERTEX = r"\s*([+-]?\d+)/\s*([+-]?\d+)/\s*([+-]?\d+)"
_FACE_LINE = re.compile(r"f " + _FACE_VERTEX * 3)


@dataclass
class Material:
    """Surface properties: base colour, emission, specularity and an optional texture."""

    albedo: Vec3 = field(default_factory=Vec3)
    emission_color: Vec3 = field(default_factory=Vec3)
    emission_strength: float = 0.0
    specular: float = 0.0
    texture: Optional[Texture] = None


def material_white() -> Material:
    return Material(Vec3(1.0, 1.0, 1.0), Vec3(0.0, 0.0, 0.0), 0.0, 0.5)


def material_red() -> Material:
    return Material(Vec3(1.0, 0.0, 0.0), Vec3(1.0, 0.9, 0.7), 0.0, 0.0)


def material_green() -> Material:
    return Material(Vec3(0.0, 1.0, 0.0), Vec3(0.0, 0.0, 0.0), 0.0, 0.5)


def material_blue() -> Material:
    return Material(Vec3(0.0, 0.0, 1.0), Vec3(0.0, 0.0, 0.0), 0.0, 1.0)


@dataclass
class HitInfo:
    """The closest intersection found so far along a ray."""

    has_hit: bool = False
    hit_distance: float = FLT_MAX
    hit_position: Vec3 = field(default_factory=Vec3)
    material: Material = field(default_factory=Material)
    normal: Vec3 = field(default_factory=Vec3)
    uv: Vec2 = field(default_factory=Vec2)


@dataclass
class Ray:
    origin: Vec3
    direction: Vec3

    def at(self, t: float) -> Vec3:
        """The point reached after travelling ``t`` along the direction."""
        return self.origin + self.direction * t


def _acos(value: float) -> float:
    return math.acos(value) if -1.0 <= value <= 1.0 else math.nan


@dataclass
class Sphere:
    radius: float
    center: Vec3
    material: Material

    def intersect(self, ray: Ray, hit: HitInfo) -> bool:
        """Record the near intersection in ``hit`` if it is closer; return whether it was."""
        oc = self.center - ray.origin
        a = ray.direction.dot(ray.direction)
        b = -2.0 * ray.direction.dot(oc)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return False
        t_min = (-b - math.sqrt(discriminant)) / (2.0 * a)
        if not (0.0 < t_min < hit.hit_distance):
            return False

        position = ray.at(t_min)
        hit.hit_distance = t_min
        hit.material = self.material
        hit.has_hit = True
        hit.hit_position = position
        hit.normal = (position - self.center).normalized()

        theta = _acos(position.y / self.radius)
        phi = math.atan2(position.x, position.z)
        if phi < 0.0:
            phi += 2 * PI
        hit.uv = Vec2(phi / (2.0 * PI), theta / PI)
        return True


@dataclass(frozen=True)
class Face:
    """A triangle as zero-based indices into vertices, texture coordinates and normals."""

    v: Tuple[int, int, int]
    vt: Tuple[int, int, int]
    vn: Tuple[int, int, int]


@dataclass
class Mesh:
    vertices: List[Vec3] = field(default_factory=list)
    normals: List[Vec3] = field(default_factory=list)
    uvs: List[Vec2] = field(default_factory=list)
    faces: List[Face] = field(default_factory=list)


def face_intersect(
    verts: Sequence[Vec3],
    norms: Sequence[Vec3],
    uvs: Sequence[Vec2],
    ray: Ray,
    hit: HitInfo,
    material: Material,
) -> bool:
    """Test one front-facing triangle; update ``hit`` and return True on a closer hit."""
    p1, p2, p3 = verts
    e1 = p2 - p1
    e2 = p3 - p1
    q = ray.direction.cross(e2)
    a = e1.dot(q)
    if -EPSILON < a < EPSILON:
        return False

    f = 1 / a
    s = ray.origin - p1
    u = f * s.dot(q)
    if u < 0:
        return False

    r = s.cross(e1)
    v = f * ray.direction.dot(r)
    if v < 0 or u + v > 1:
        return False

    t = f * e2.dot(r)
    if t < 0 or t > hit.hit_distance:
        return False

    if ray.direction.dot(e1.cross(e2)) > 0:
        return False

    hit.has_hit = True
    hit.hit_distance = t
    hit.hit_position = ray.at(t)
    hit.material = material

    v2 = hit.hit_position - p1
    d00 = e1.dot(e1)
    d01 = e1.dot(e2)
    d11 = e2.dot(e2)
    d20 = v2.dot(e1)
    d21 = v2.dot(e2)
    denom = d00 * d11 - d01 * d01

    bary_v = (d11 * d20 - d01 * d21) / denom
    bary_w = (d00 * d21 - d01 * d20) / denom
    bary_u = 1.0 - bary_v - bary_w

    uv_a, uv_b, uv_c = uvs
    n_a, n_b, n_c = norms
    hit.uv = Vec2(
        bary_u * uv_a.x + bary_v * uv_b.x + bary_w * uv_c.x,
        bary_u * uv_a.y + bary_v * uv_b.y + bary_w * uv_c.y,
    )
    hit.normal = (n_a * bary_u + n_b * bary_v + n_c * bary_w).normalized()
    return True


@dataclass
class Model:
    """A mesh placed in the scene with a single material."""

    mesh: Mesh
    center: Vec3
    material: Material

    def intersect(self, ray: Ray, hit: HitInfo) -> bool:
        """Test every face; return whether any of them updated ``hit``."""
        mesh = self.mesh
        found = False
        for face in mesh.faces:
            verts = [mesh.vertices[i] for i in face.v]
            norms = [mesh.normals[i] for i in face.vn]
            uvs = [mesh.uvs[i] for i in face.vt]
            if face_intersect(verts, norms, uvs, ray, hit, self.material):
                found = True
        return found


def place_model(mesh: Mesh, center: Vec3, material: Material) -> Model:
    """Build a model whose mesh vertices are moved by ``center``."""
    moved = Mesh(
        vertices=[vertex + center for vertex in mesh.vertices],
        normals=list(mesh.normals),
        uvs=list(mesh.uvs),
        faces=list(mesh.faces),
    )
    return Model(moved, center, material)


def _floats(tokens: Sequence[str], count: int) -> Optional[List[float]]:
    if len(tokens) < count:
        return None
    try:
        return [float(token) for token in tokens[:count]]
    except ValueError:
        return None


def parse_obj(lines: Iterable[str]) -> Mesh:
    """Read vertices, texture coordinates, normals and v/vt/vn triangles from OBJ text."""
    mesh = Mesh()
    for line in lines:
        if line.startswith("v "):
            values = _floats(line.split()[1:], 3)
            if values is not None:
                mesh.vertices.append(Vec3(*values))
        elif line.startswith("vt "):
            values = _floats(line.split()[1:], 2)
            if values is not None:
                mesh.uvs.append(Vec2(*values))
        elif line.startswith("vn "):
            values = _floats(line.split()[1:], 3)
            if values is not None:
                mesh.normals.append(Vec3(*values))
        elif line.startswith("f "):
            match = _FACE_LINE.match(line)
            if match is None:
                _log.warning("bad line: %s", line.rstrip("\n"))
                continue
            idx = [int(group) - 1 for group in match.groups()]
            mesh.faces.append(
                Face(
                    v=(idx[0], idx[3], idx[6]),
                    vt=(idx[1], idx[4], idx[7]),
                    vn=(idx[2], idx[5], idx[8]),
                )
            )
    return mesh


def load_obj(path: Union[str, "PathLike[str]"]) -> Mesh:
    """Read a mesh from a Wavefront OBJ file."""
    with open(path, "r", encoding="utf-8") as handle:
        return parse_obj(handle)