"""Scene description: camera, render settings and the objects to trace."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .camera import Camera
from .geometry import HitInfo, Model, Ray, Sphere
from .vectors import Vec3


@dataclass
class SceneInfo:
    """Render settings and object counts."""

    ray_per_pixel: int
    width: int
    height: int
    max_ray_depth: int
    nb_spheres: int
    nb_models: int


@dataclass
class Scene:
    camera: Camera
    info: SceneInfo
    spheres: List[Sphere] = field(default_factory=list)
    models: List[Model] = field(default_factory=list)
    ambient_light: Vec3 = field(default_factory=lambda: Vec3(0.6, 0.6, 0.6))

    def intersect(self, ray: Ray) -> HitInfo:
        """Return the closest hit among all spheres and models."""
        best = HitInfo()
        for sphere in self.spheres:
            sphere.intersect(ray, best)
        for model in self.models:
            model.intersect(ray, best)
        return best