import pytest

from raytrace.camera import Camera, adjugate, cofactor, determinant, inverse
from raytrace.vectors import Vec3, Vec4

IDENTITY = [1.0 if r == c else 0.0 for r in range(4) for c in range(4)]

SAMPLE = [
    2.0, 1.0, 0.0, 3.0,
    0.0, 1.0, 4.0, 1.0,
    1.0, 0.0, 2.0, 0.0,
    3.0, 2.0, 1.0, 1.0,
]


def _matmul(a, b, n=4):
    return [
        sum(a[r * n + k] * b[k * n + c] for k in range(n))
        for r in range(n)
        for c in range(n)
    ]


def _default_camera():
    return Camera(
        60.0,
        Vec3(0.0, 0.0, 0.0),
        Vec3(0.0, 0.0, -1.0),
        Vec3(0.0, 1.0, 0.0),
        1.0,
        1000.0,
        1.0,
    )


def test_default_camera_matrix_is_identity():
    assert _default_camera().cam_to_world() == pytest.approx(IDENTITY)


def test_camera_position_maps_to_origin():
    cam = Camera(
        45.0, Vec3(1.0, 2.0, 3.0), Vec3(-2.0, 0.5, -4.0), Vec3(0.0, 1.0, 0.0),
        0.1, 100.0, 1.5,
    )
    matrix = cam.cam_to_world()
    mapped = Vec4.from_vec3(cam.position, 1.0).transform(matrix)
    assert tuple(mapped.xyz()) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)


def test_camera_rotation_rows_are_orthonormal():
    cam = Camera(
        45.0, Vec3(1.0, 2.0, 3.0), Vec3(-2.0, 0.5, -4.0), Vec3(0.0, 1.0, 0.0),
        0.1, 100.0, 1.5,
    )
    m = cam.cam_to_world()
    rows = [Vec3(*m[4 * i:4 * i + 3]) for i in range(3)]
    for i, a in enumerate(rows):
        assert a.length() == pytest.approx(1.0)
        for b in rows[i + 1:]:
            assert a.dot(b) == pytest.approx(0.0, abs=1e-12)


def test_determinant_of_identity():
    assert determinant(IDENTITY) == pytest.approx(1.0)


def test_determinant_of_diagonal():
    diag = [0.0] * 16
    for i, value in enumerate((2.0, 3.0, 4.0, 5.0)):
        diag[i * 5] = value
    assert determinant(diag) == pytest.approx(120.0)


def test_determinant_rejects_non_square():
    with pytest.raises(ValueError):
        determinant([1.0, 2.0, 3.0])


def test_cofactor_removes_row_and_column():
    m = [float(v) for v in range(9)]
    assert cofactor(m, 0, 0, 3) == [m[4], m[5], m[7], m[8]]


def test_adjugate_times_matrix_is_det_identity():
    det = determinant(SAMPLE)
    product = _matmul(SAMPLE, adjugate(SAMPLE))
    assert product == pytest.approx([det * v for v in IDENTITY], abs=1e-9)


def test_inverse_round_trip():
    product = _matmul(SAMPLE, inverse(SAMPLE))
    assert product == pytest.approx(IDENTITY, abs=1e-9)


def test_inverse_of_identity():
    assert inverse(IDENTITY) == pytest.approx(IDENTITY)


def test_inverse_of_singular_matrix_raises():
    singular = list(SAMPLE)
    singular[4:8] = [0.0, 0.0, 0.0, 0.0]
    with pytest.raises(ValueError):
        inverse(singular)