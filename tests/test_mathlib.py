import math

import pytest

from lotuskit.mathlib import (
    Mat4,
    Vec2,
    Vec3,
    Vec4,
    identity,
    look_at,
    mul_mat4,
    mul_mat4_vec3,
    ortho,
    perspective,
    rot_mat4,
    rotx_mat4,
    roty_mat4,
    rotz_mat4,
    scale_mat4,
    to_radians,
    trans_mat4,
)


def approx_mat(m):
    return pytest.approx(list(m), abs=1e-9)


def test_to_radians_half_turn_is_pi():
    assert to_radians(180.0) == pytest.approx(math.pi)


def test_vec2_add_sub_round_trip():
    a, b = Vec2(3.5, -2.0), Vec2(1.25, 4.0)
    assert tuple((a + b) - b) == pytest.approx(tuple(a))


def test_vec2_normalized_has_unit_length():
    n = Vec2(3.0, 4.0).normalized()
    assert math.hypot(n.x, n.y) == pytest.approx(1.0)


def test_vec2_scale_and_dot_consistent():
    v = Vec2(2.0, 7.0)
    assert v.scale(3.0).dot(v) == pytest.approx(3.0 * v.dot(v))


def test_vec3_cross_is_orthogonal():
    a, b = Vec3(1.0, 2.0, 3.0), Vec3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_vec3_cross_anticommutes():
    a, b = Vec3(1.0, 2.0, 3.0), Vec3(-4.0, 0.5, 2.0)
    assert tuple(a.cross(b)) == pytest.approx(tuple(-b.cross(a)))


def test_vec3_normalized_has_unit_length():
    n = Vec3(2.0, -3.0, 6.0).normalized()
    assert n.dot(n) == pytest.approx(1.0)


def test_vec3_normalize_zero_raises():
    with pytest.raises(ValueError):
        Vec3().normalized()


def test_vec4_operations():
    a, b = Vec4(1.0, 2.0, 3.0, 4.0), Vec4(0.5, 0.5, 0.5, 0.5)
    assert tuple((a - b) + b) == pytest.approx(tuple(a))
    n = a.normalized()
    assert n.dot(n) == pytest.approx(1.0)
    assert a.scale(2.0).dot(b) == pytest.approx(2.0 * a.dot(b))


def test_mat4_requires_sixteen_values():
    with pytest.raises(ValueError):
        Mat4([1.0, 2.0])


def test_identity_is_neutral_for_multiplication():
    m = rot_mat4(1.0, 2.0, 3.0, 37.0)
    assert mul_mat4(identity(), m).m == approx_mat(m)
    assert mul_mat4(m, identity()).m == approx_mat(m)


def test_matmul_operator_matches_function():
    a, b = rotx_mat4(30.0), scale_mat4(2.0, 3.0, 4.0)
    assert (a @ b).m == approx_mat(mul_mat4(a, b))


def test_mul_mat4_is_associative():
    a, b, c = rotx_mat4(20.0), trans_mat4(1.0, 2.0, 3.0), scale_mat4(2.0, 1.0, 0.5)
    left = mul_mat4(mul_mat4(a, b), c)
    right = mul_mat4(a, mul_mat4(b, c))
    assert left.m == approx_mat(right)


def test_translation_moves_origin():
    p = mul_mat4_vec3(trans_mat4(4.0, -5.0, 6.0), Vec3())
    assert tuple(p) == pytest.approx((4.0, -5.0, 6.0))


def test_scale_matrix_scales_point():
    v = Vec3(1.5, -2.0, 3.0)
    p = scale_mat4(2.0, 3.0, 4.0) @ v
    assert tuple(p) == pytest.approx((v.x * 2.0, v.y * 3.0, v.z * 4.0))


@pytest.mark.parametrize(
    "axis, single",
    [((1.0, 0.0, 0.0), rotx_mat4), ((0.0, 1.0, 0.0), roty_mat4), ((0.0, 0.0, 1.0), rotz_mat4)],
)
def test_axis_rotations_match_general_rotation(axis, single):
    assert rot_mat4(*axis, 47.0).m == approx_mat(single(47.0))


def test_rotation_axis_is_normalized():
    assert rot_mat4(0.0, 0.0, 5.0, 33.0).m == approx_mat(rot_mat4(0.0, 0.0, 1.0, 33.0))


def test_rotation_preserves_length():
    v = Vec3(1.0, 2.0, -3.0)
    r = rot_mat4(1.0, 1.0, 0.0, 71.0) @ v
    assert r.dot(r) == pytest.approx(v.dot(v))


def test_look_at_maps_eye_to_origin():
    eye = Vec3(2.0, 3.0, 5.0)
    view = look_at(eye, Vec3(0.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0))
    assert tuple(view @ eye) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)


def test_perspective_sets_projective_term():
    m = perspective(to_radians(45.0), 16 / 9, 0.1, 1000.0)
    assert m[11] == -1.0


def test_ortho_maps_box_corners_to_clip_cube():
    m = ortho(0.0, 1280.0, 0.0, 720.0, 0.1, 10.0)
    low = m @ Vec3(0.0, 0.0, -0.1)
    high = m @ Vec3(1280.0, 720.0, -10.0)
    assert tuple(low) == pytest.approx((-1.0, -1.0, -1.0))
    assert tuple(high) == pytest.approx((1.0, 1.0, 1.0))