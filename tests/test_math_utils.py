"""
Unit tests for the vector/matrix helpers.
"""

import math

import pytest

from prefab_shapes.utils.math_utils import (
    IDENTITY3,
    as_mat3,
    cross,
    determinant,
    diagonal,
    inverse,
    is_finite,
    is_rotation,
    mat_mul,
    mat_vec,
    normalize,
    rotation_from_axis_angle,
    rotation_from_euler,
    rotation_z,
    transpose,
)


def assert_mat_close(a, b, tol=1e-9):
    for row_a, row_b in zip(a, b):
        assert row_a == pytest.approx(row_b, abs=tol)


def test_cross_is_right_handed():
    assert cross((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)) == (0.0, 0.0, 1.0)
    assert cross((0.0, 1.0, 0.0), (0.0, 0.0, 1.0)) == (1.0, 0.0, 0.0)


def test_normalize_rejects_zero_vector():
    with pytest.raises(ValueError):
        normalize((0.0, 0.0, 0.0))


def test_normalize_gives_unit_length():
    x, y, z = normalize((3.0, 4.0, 12.0))
    assert math.sqrt(x * x + y * y + z * z) == pytest.approx(1.0)


def test_inverse_times_matrix_is_identity():
    m = ((2.0, 1.0, 0.0), (0.5, 3.0, 1.0), (0.0, -1.0, 4.0))
    assert_mat_close(mat_mul(inverse(m), m), IDENTITY3)
    assert_mat_close(mat_mul(m, inverse(m)), IDENTITY3)


def test_inverse_of_singular_matrix_raises():
    with pytest.raises(ValueError):
        inverse(((1.0, 2.0, 3.0), (2.0, 4.0, 6.0), (0.0, 0.0, 1.0)))


def test_determinant_of_diagonal():
    assert determinant(diagonal(2.0, 3.0, -4.0)) == pytest.approx(-24.0)


def test_transpose():
    m = ((1.0, 2.0, 3.0), (4.0, 5.0, 6.0), (7.0, 8.0, 9.0))
    assert transpose(m) == ((1.0, 4.0, 7.0), (2.0, 5.0, 8.0), (3.0, 6.0, 9.0))


def test_rotation_z_turns_x_into_y():
    assert mat_vec(rotation_z(math.pi / 2), (1.0, 0.0, 0.0)) == pytest.approx((0.0, 1.0, 0.0))


def test_euler_rotation_applies_x_then_y_then_z():
    # X by 90 maps +Y to +Z; then Z by 90 leaves +Z alone
    r = rotation_from_euler(math.pi / 2, 0.0, math.pi / 2)
    assert mat_vec(r, (0.0, 1.0, 0.0)) == pytest.approx((0.0, 0.0, 1.0), abs=1e-12)
    # +X is untouched by X, then rotated to +Y by Z
    assert mat_vec(r, (1.0, 0.0, 0.0)) == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)


def test_axis_angle_matches_rotation_z():
    assert_mat_close(
        rotation_from_axis_angle((0.0, 0.0, 2.0), 0.7),
        rotation_z(0.7),
    )


def test_is_rotation():
    assert is_rotation(IDENTITY3)
    assert is_rotation(rotation_from_euler(0.3, -1.2, 2.5))
    assert not is_rotation(diagonal(-1.0, 1.0, 1.0))
    assert not is_rotation(diagonal(2.0, 1.0, 1.0))


def test_as_mat3_rejects_wrong_shape():
    with pytest.raises(ValueError):
        as_mat3([[1.0, 0.0], [0.0, 1.0]])


def test_is_finite():
    assert is_finite((1.0, 2, -3.5))
    assert not is_finite((1.0, float('nan'), 0.0))
    assert not is_finite((1.0, float('inf'), 0.0))
    assert not is_finite((1.0, "2", 0.0))
