import math

import pytest

from raytrace.utils import (
    deg2rad,
    encode_ppm,
    random01,
    random_range,
    seed,
    write_ppm,
)


def test_deg2rad_half_turn_is_pi():
    assert deg2rad(180) == pytest.approx(math.pi)


def test_deg2rad_zero():
    assert deg2rad(0) == 0


def test_seed_makes_sequence_reproducible():
    seed(42)
    first = [random01() for _ in range(10)]
    seed(42)
    second = [random01() for _ in range(10)]
    assert first == second


def test_random01_bounds():
    seed(7)
    values = [random01() for _ in range(500)]
    assert all(0.0 <= v <= 1.0 for v in values)


def test_random_range_bounds():
    seed(3)
    low, high = -1.0, 1.0
    values = [random_range(low, high) for _ in range(500)]
    assert all(low <= v < high + 1 for v in values)


def test_encode_ppm_single_red_pixel():
    data = encode_ppm(1, 1, bytes([255, 0, 0]))
    assert data == b"P6\n1 1\n255\n" + bytes([255, 0, 0])


def test_encode_ppm_truncates_extra_data():
    pixels = bytes(range(12))
    data = encode_ppm(2, 1, pixels)
    assert data.endswith(pixels[:6])
    assert not data.endswith(pixels)


def test_encode_ppm_rejects_short_data():
    with pytest.raises(ValueError):
        encode_ppm(2, 2, bytes(5))


def test_encode_ppm_rejects_negative_size():
    with pytest.raises(ValueError):
        encode_ppm(-1, 2, b"")


def test_write_ppm_round_trip(tmp_path):
    pixels = bytes(range(2 * 3 * 3))
    target = tmp_path / "out.ppm"
    write_ppm(target, 2, 3, pixels)
    assert target.read_bytes() == encode_ppm(2, 3, pixels)