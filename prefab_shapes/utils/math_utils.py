"""
Vector and matrix utilities for Prefab Shapes.

Vectors are plain (x, y, z) tuples and matrices are row-major 3x3 tuples
of rows, which keeps the generated data directly usable as vertex
attributes without conversion.
"""

from typing import Sequence, Tuple
import math

Vec3 = Tuple[float, float, float]
Mat3 = Tuple[Vec3, Vec3, Vec3]

IDENTITY3: Mat3 = (
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0),
)


def add(a: Vec3, b: Vec3) -> Vec3:
    """Vector addition."""
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def sub(a: Vec3, b: Vec3) -> Vec3:
    """Vector subtraction."""
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def scale_vec(v: Vec3, s: float) -> Vec3:
    """Multiply a vector by a scalar."""
    return (v[0] * s, v[1] * s, v[2] * s)


def hadamard(a: Vec3, b: Vec3) -> Vec3:
    """Component-wise product."""
    return (a[0] * b[0], a[1] * b[1], a[2] * b[2])


def dot(a: Vec3, b: Vec3) -> float:
    """Dot product."""
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Cross product (right-handed)."""
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def length(v: Vec3) -> float:
    """Euclidean length."""
    return math.sqrt(dot(v, v))


def normalize(v: Vec3) -> Vec3:
    """
    Return v scaled to unit length.

    Raises:
        ValueError: If v has (near) zero length
    """
    n = length(v)
    if n < 1e-12:
        raise ValueError("Cannot normalize a zero-length vector")
    return (v[0] / n, v[1] / n, v[2] / n)


def triangle_normal(a: Vec3, b: Vec3, c: Vec3) -> Vec3:
    """
    Unnormalized normal of triangle (a, b, c).

    Points towards the viewer when the triangle is counter-clockwise.
    Its length is twice the triangle area.
    """
    return cross(sub(b, a), sub(c, a))


def mat_mul(a: Mat3, b: Mat3) -> Mat3:
    """Matrix product a * b."""
    return tuple(
        tuple(sum(a[i][k] * b[k][j] for k in range(3)) for j in range(3))
        for i in range(3)
    )


def mat_vec(m: Mat3, v: Vec3) -> Vec3:
    """Matrix-vector product m * v."""
    return (dot(m[0], v), dot(m[1], v), dot(m[2], v))


def transpose(m: Mat3) -> Mat3:
    """Matrix transpose."""
    return tuple(tuple(m[j][i] for j in range(3)) for i in range(3))


def determinant(m: Mat3) -> float:
    """Determinant of a 3x3 matrix."""
    return dot(m[0], cross(m[1], m[2]))


def inverse(m: Mat3) -> Mat3:
    """
    Inverse of a 3x3 matrix via the adjugate.

    Raises:
        ValueError: If the matrix is singular
    """
    det = determinant(m)
    if abs(det) < 1e-12:
        raise ValueError("Matrix is singular")

    # Columns of the inverse are the cross products of the rows
    c0 = cross(m[1], m[2])
    c1 = cross(m[2], m[0])
    c2 = cross(m[0], m[1])
    inv_det = 1.0 / det
    return (
        (c0[0] * inv_det, c1[0] * inv_det, c2[0] * inv_det),
        (c0[1] * inv_det, c1[1] * inv_det, c2[1] * inv_det),
        (c0[2] * inv_det, c1[2] * inv_det, c2[2] * inv_det),
    )


def diagonal(x: float, y: float, z: float) -> Mat3:
    """Diagonal (non-uniform scale) matrix."""
    return (
        (x, 0.0, 0.0),
        (0.0, y, 0.0),
        (0.0, 0.0, z),
    )


def rotation_x(radians: float) -> Mat3:
    """Rotation about the X axis (counter-clockwise looking down -X)."""
    c, s = math.cos(radians), math.sin(radians)
    return (
        (1.0, 0.0, 0.0),
        (0.0, c, -s),
        (0.0, s, c),
    )


def rotation_y(radians: float) -> Mat3:
    """Rotation about the Y axis."""
    c, s = math.cos(radians), math.sin(radians)
    return (
        (c, 0.0, s),
        (0.0, 1.0, 0.0),
        (-s, 0.0, c),
    )


def rotation_z(radians: float) -> Mat3:
    """Rotation about the Z axis."""
    c, s = math.cos(radians), math.sin(radians)
    return (
        (c, -s, 0.0),
        (s, c, 0.0),
        (0.0, 0.0, 1.0),
    )


def rotation_from_euler(x: float, y: float, z: float) -> Mat3:
    """
    Rotation applying X first, then Y, then Z.

    Args:
        x, y, z: Angles in radians

    Returns:
        Rz * Ry * Rx
    """
    return mat_mul(rotation_z(z), mat_mul(rotation_y(y), rotation_x(x)))


def rotation_from_axis_angle(axis: Vec3, radians: float) -> Mat3:
    """
    Rotation about an arbitrary axis (Rodrigues' formula).

    Raises:
        ValueError: If axis has zero length
    """
    ux, uy, uz = normalize(axis)
    c, s = math.cos(radians), math.sin(radians)
    t = 1.0 - c
    return (
        (c + ux * ux * t, ux * uy * t - uz * s, ux * uz * t + uy * s),
        (uy * ux * t + uz * s, c + uy * uy * t, uy * uz * t - ux * s),
        (uz * ux * t - uy * s, uz * uy * t + ux * s, c + uz * uz * t),
    )


def as_mat3(rows: Sequence[Sequence[float]]) -> Mat3:
    """
    Coerce a nested sequence into a 3x3 float matrix.

    Raises:
        ValueError: If the input is not 3 rows of 3 numbers
    """
    if len(rows) != 3 or any(len(row) != 3 for row in rows):
        raise ValueError("Expected a 3x3 matrix")
    return tuple(tuple(float(value) for value in row) for row in rows)


def is_rotation(m: Mat3, tolerance: float = 1e-4) -> bool:
    """
    Check whether m is a proper rotation (orthonormal, determinant +1).

    Reflections are rejected because they invert triangle winding.
    """
    product = mat_mul(m, transpose(m))
    for i in range(3):
        for j in range(3):
            expected = 1.0 if i == j else 0.0
            if abs(product[i][j] - expected) > tolerance:
                return False
    return abs(determinant(m) - 1.0) <= tolerance


def is_finite(values: Sequence[float]) -> bool:
    """True when every value is a finite real number."""
    return all(
        isinstance(v, (int, float)) and not isinstance(v, bool) and math.isfinite(v)
        for v in values
    )
