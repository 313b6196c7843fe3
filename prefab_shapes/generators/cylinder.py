"""
Cylinder and cone generators for Prefab Shapes.

Both shapes come from one kernel: a side wall swept around the Z axis
between a bottom circle at z = -0.5 and a top circle at z = +0.5,
plus optional flat caps. The cone is then shifted along Z so the mean
of its distinct sample positions sits at the origin.

- Side normals follow the slant of the generating line, so a cone's
  normals tilt upwards instead of pointing straight out.
- A zero top radius (cone) turns the wall into a fan of triangles with
  one apex vertex per segment; no zero-area triangles are emitted.
- Caps are separate triangle fans with their own vertices so cap and
  wall normals never blend.
"""

import math
from typing import List

from ..config import CYLINDER_HALF_HEIGHT, CYLINDER_RADIUS
from ..models.vertex import Topology
from ..utils.math_utils import normalize
from .base import GeometryData


def generate_frustum(
    radial_segments: int,
    bottom_radius: float,
    top_radius: float,
    top_cap: bool = True,
    bottom_cap: bool = True
) -> GeometryData:
    """
    Generate a capped frustum around the Z axis.

    Args:
        radial_segments: Divisions around the axis (>= 3)
        bottom_radius: Radius at z = -0.5 (> 0)
        top_radius: Radius at z = +0.5 (0 for a cone)
        top_cap: Emit the top disk (ignored when top_radius is 0)
        bottom_cap: Emit the bottom disk

    Returns:
        GeometryData (TRIANGLE_LIST)
    """
    geometry = GeometryData(topology=Topology.TRIANGLE_LIST)
    n = radial_segments
    h = CYLINDER_HALF_HEIGHT
    height = 2.0 * h

    angles = [2.0 * math.pi * (j % n) / n for j in range(n + 1)]

    def slant_normal(theta: float):
        return normalize((
            math.cos(theta) * height,
            math.sin(theta) * height,
            bottom_radius - top_radius,
        ))

    # Bottom edge of the wall, seam vertex included
    bottom = [
        geometry.add_vertex(
            (bottom_radius * math.cos(t), bottom_radius * math.sin(t), -h),
            slant_normal(t),
            (j / n, 0.0),
        )
        for j, t in enumerate(angles)
    ]

    if top_radius > 0.0:
        top = [
            geometry.add_vertex(
                (top_radius * math.cos(t), top_radius * math.sin(t), h),
                slant_normal(t),
                (j / n, 1.0),
            )
            for j, t in enumerate(angles)
        ]
        for j in range(n):
            geometry.add_quad(bottom[j], bottom[j + 1], top[j + 1], top[j])
    else:
        # Apex vertex per segment, normal taken at the segment's mid angle
        for j in range(n):
            mid = 2.0 * math.pi * (j + 0.5) / n
            apex = geometry.add_vertex(
                (0.0, 0.0, h), slant_normal(mid), ((j + 0.5) / n, 1.0)
            )
            geometry.add_triangle(bottom[j], bottom[j + 1], apex)

    if top_cap and top_radius > 0.0:
        _add_cap(geometry, n, top_radius, h, facing_up=True)

    if bottom_cap:
        _add_cap(geometry, n, bottom_radius, -h, facing_up=False)

    return geometry


def _add_cap(
    geometry: GeometryData,
    segments: int,
    radius: float,
    z: float,
    facing_up: bool
) -> None:
    """
    Add a flat disk as a triangle fan around its centre.

    Args:
        geometry: GeometryData to add to
        segments: Number of rim vertices
        radius: Disk radius
        z: Disk height
        facing_up: True for normal +Z, False for -Z
    """
    normal = (0.0, 0.0, 1.0) if facing_up else (0.0, 0.0, -1.0)
    # Flip v on the bottom cap so the texture is not mirrored seen from below
    v_sign = 1.0 if facing_up else -1.0

    center = geometry.add_vertex((0.0, 0.0, z), normal, (0.5, 0.5))
    rim: List[int] = []
    for j in range(segments):
        t = 2.0 * math.pi * j / segments
        c, s = math.cos(t), math.sin(t)
        rim.append(geometry.add_vertex(
            (radius * c, radius * s, z),
            normal,
            (0.5 + 0.5 * c, 0.5 + 0.5 * v_sign * s),
        ))

    for j in range(segments):
        a = rim[j]
        b = rim[(j + 1) % segments]
        if facing_up:
            geometry.add_triangle(center, a, b)
        else:
            geometry.add_triangle(center, b, a)


def generate_cylinder(
    radial_segments: int,
    top_cap: bool = True,
    bottom_cap: bool = True
) -> GeometryData:
    """Generate the unit cylinder (diameter 1, height 1)."""
    return generate_frustum(
        radial_segments, CYLINDER_RADIUS, CYLINDER_RADIUS, top_cap, bottom_cap
    )


def generate_cone(radial_segments: int, bottom_cap: bool = True) -> GeometryData:
    """
    Generate the unit cone (base diameter 1, height 1).

    The cone is shifted along Z so that the average of its distinct sample
    positions is the origin. The shift depends on the resolution and on
    whether the base cap is present; see cone_base_height().
    """
    geometry = generate_frustum(
        radial_segments, CYLINDER_RADIUS, 0.0, top_cap=False, bottom_cap=bottom_cap
    )
    geometry.recenter()
    return geometry


def cone_base_height(radial_segments: int, bottom_cap: bool = True) -> float:
    """
    Z of the cone's base after centring; the apex sits one unit higher.

    Distinct samples are the rim ring, one apex point and, with a cap, the
    base centre.
    """
    n = radial_segments
    h = CYLINDER_HALF_HEIGHT
    base_samples = n + 1 if bottom_cap else n
    mean_z = (h - h * base_samples) / (base_samples + 1)
    return -h - mean_z
