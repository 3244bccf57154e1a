# raytrace

Pure-Python building blocks for a small Monte Carlo path tracer. The package
covers vector maths, a pinhole camera with its camera-to-world matrix, binary
PPM (P6) textures, materials, spheres and triangle meshes loaded from
Wavefront OBJ files, nearest-hit scene intersection, a seedable random
source and a PPM image writer.

## Installation

```
pip install .
```

There are no runtime dependencies. To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from raytrace.camera import Camera
from raytrace.geometry import Ray, Sphere, material_green, material_blue
from raytrace.scene import Scene, SceneInfo
from raytrace.utils import write_ppm
from raytrace.vectors import Vec3, Vec4

camera = Camera(
    fov=60.0,
    position=Vec3(0.0, 0.0, 0.0),
    target=Vec3(0.0, 0.0, -1.0),
    up=Vec3(0.0, 1.0, 0.0),
    near=1.0,
    far=1000.0,
    aspect_ratio=4 / 3,
)
info = SceneInfo(ray_per_pixel=4, width=4, height=3,
                 max_ray_depth=5, nb_spheres=2, nb_models=0)
scene = Scene(camera, info)
scene.spheres.append(Sphere(0.5, Vec3(0.0, 0.0, -5.0), material_green()))
scene.spheres.append(Sphere(100.0, Vec3(0.0, -100.5, -5.0), material_blue()))

matrix = camera.cam_to_world()
origin = Vec4.from_vec3(camera.position, 1.0).transform(matrix).xyz()
hit = scene.intersect(Ray(origin, Vec3(0.0, 0.0, -1.0)))
print(hit.has_hit, hit.hit_distance, hit.normal, hit.uv)

# 4x3 image, every pixel red
write_ppm("out.ppm", 4, 3, bytes([255, 0, 0]) * 12)
```

## Modules

- `raytrace.vectors`: immutable `Vec2`, `Vec3` and `Vec4`. `Vec3` supports
  `+`, `-`, unary `-`, `*` (by a number or component-wise by another
  `Vec3`), `/` by a number, `length`, `normalized`, `dot`, `cross`,
  `reflect`, `clamp` and `lerp`. `Vec4` has `from_vec3`, `transform` (by a
  row-major 4×4 matrix given as 16 numbers) and `xyz`. The module also has
  the random helpers `random_vec301`, `random_vec3_range`,
  `random_unit_vector` and `random_on_hemisphere`.
- `raytrace.camera`: `Camera`, whose `cam_to_world()` returns a row-major
  4×4 matrix. It also has square-matrix helpers `determinant`, `cofactor`,
  `adjugate` and `inverse`. `inverse` raises `ValueError` for a singular
  matrix.
- `raytrace.texture`: `Texture` (with `pixel(x, y)`), `Pixel`, `parse_ppm`
  and `load_texture`. These read P6 images with a maximum colour value of
  255 and raise `TextureError` on malformed input.
- `raytrace.geometry`: `Material` and the presets `material_white`,
  `material_red`, `material_green` and `material_blue`. It also has `Ray`
  (with `at(t)`), `HitInfo`, `Sphere.intersect`, `Face`, `Mesh`,
  `Model.intersect`, `place_model`, `face_intersect`, and the OBJ readers
  `parse_obj` and `load_obj`. OBJ faces must be triangles written as
  `v/vt/vn`. Other face lines are logged and skipped. The intersection
  methods update the given `HitInfo` when they find a closer hit and return
  whether they did.
- `raytrace.scene`: `SceneInfo` (render settings and object counts) and
  `Scene`. `Scene.intersect(ray)` returns the nearest hit among its spheres
  and models. The default ambient light is `Vec3(0.6, 0.6, 0.6)`.
- `raytrace.utils`: `deg2rad`, a shared random source (`seed`, `random01`,
  `random_range`), and PPM output with `encode_ppm` and `write_ppm`.

## What this package does not do

The package does not include the path-tracing loop that follows rays
through bounces and averages samples into an image. You get the scene and
its intersection tests, but no function that renders a `Scene` to pixels.
There is also no command-line program. Use the package as a library.