import math

import numpy as np
import pytest

from toonview import transforms


def test_normalize_gives_unit_length_and_same_direction():
    v = transforms.normalize((3.0, 4.0, 12.0))
    assert np.linalg.norm(v) == pytest.approx(1.0)
    assert np.allclose(np.cross(v, (3.0, 4.0, 12.0)), 0.0)


def test_normalize_zero_vector_raises():
    with pytest.raises(ValueError):
        transforms.normalize((0.0, 0.0, 0.0))


def test_perspective_structure():
    m = transforms.perspective(math.radians(45.0), 800 / 600, 0.1, 100.0)
    assert m[3, 2] == -1.0
    assert m[3, 3] == 0.0
    assert m[0, 0] * (800 / 600) == pytest.approx(m[1, 1])


def test_perspective_maps_near_and_far_to_clip_range():
    near, far = 0.1, 100.0
    m = transforms.perspective(math.radians(45.0), 1.0, near, far)
    for depth, expected in ((near, -1.0), (far, 1.0)):
        clip = m @ np.array([0.0, 0.0, -depth, 1.0])
        assert clip[2] / clip[3] == pytest.approx(expected)


def test_perspective_rejects_zero_aspect():
    with pytest.raises(ValueError):
        transforms.perspective(1.0, 0.0, 0.1, 100.0)


def test_look_at_moves_eye_to_origin_and_target_onto_negative_z():
    eye = np.array([3.0, 0.5, 40.0])
    view = transforms.look_at(eye, (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    assert np.allclose(view @ np.append(eye, 1.0), [0.0, 0.0, 0.0, 1.0])
    target = view @ np.array([0.0, 0.0, 0.0, 1.0])
    assert np.allclose(target[:2], 0.0)
    assert target[2] == pytest.approx(-np.linalg.norm(eye))


def test_rotate_is_orthonormal_and_preserves_axis():
    axis = np.array([1.0, 2.0, 3.0])
    m = transforms.rotate(np.identity(4), 0.7, axis)
    r = m[:3, :3]
    assert np.allclose(r @ r.T, np.identity(3))
    assert np.linalg.det(r) == pytest.approx(1.0)
    assert np.allclose(r @ axis, axis)


def test_rotate_inverse_angle_cancels():
    m = transforms.rotate(np.identity(4), 1.1, (0.0, 1.0, 0.0))
    back = transforms.rotate(m, -1.1, (0.0, 1.0, 0.0))
    assert np.allclose(back, np.identity(4))


def test_scale_and_translate_compose_in_order():
    m = transforms.translate(transforms.scale(np.identity(4), 2.0), (1.0, 1.0, 1.0))
    p = m @ np.array([0.0, 0.0, 0.0, 1.0])
    assert np.allclose(p[:3], 2.0 * np.ones(3))


def test_scale_accepts_vector():
    m = transforms.scale(np.identity(4), (1.0, 2.0, 3.0))
    assert np.allclose(np.diag(m), [1.0, 2.0, 3.0, 1.0])


def test_normal_matrix_of_rotation_is_rotation():
    m = transforms.rotate(np.identity(4), 0.4, (1.0, 1.0, 0.0))
    assert np.allclose(transforms.normal_matrix(m), m[:3, :3])


def test_normal_matrix_keeps_normals_perpendicular():
    m = transforms.scale(np.identity(4), (1.0, 4.0, 1.0))
    tangent = np.array([1.0, 1.0, 0.0])
    normal = np.array([1.0, -1.0, 0.0])
    t2 = m[:3, :3] @ tangent
    n2 = transforms.normal_matrix(m) @ normal
    assert float(t2 @ n2) == pytest.approx(0.0)


def test_model_matrix_identity_rotation():
    m = transforms.model_matrix(0.0, 0.0, 50.5)
    expected = transforms.translate(transforms.scale(np.identity(4), 50.5), (0.0, -0.25, 0.0))
    assert np.allclose(m, expected)