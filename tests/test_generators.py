"""
Unit tests for the geometry kernel.

Tests cover:
- Vertex/index counts as functions of resolution
- Counter-clockwise winding seen from outside
- Unit normals and texture coordinate ranges
- Dispatch over ShapeKind
"""

import math

import pytest

from prefab_shapes.config import NORMAL_TOLERANCE, ShapeKind
from prefab_shapes.generators import (
    cone_base_height,
    generate,
    generate_axes,
    generate_cone,
    generate_cuboid,
    generate_cylinder,
    generate_quad,
    generate_sphere,
    sphere_index_count,
    sphere_vertex_count,
)
from prefab_shapes.models.vertex import Topology
from prefab_shapes.utils.math_utils import cross, dot, length, normalize, sub, triangle_normal


# =============================================================================
# Helpers
# =============================================================================

def triangles(geometry):
    idx = geometry.indices
    for i in range(0, len(idx), 3):
        yield tuple(geometry.vertices[j] for j in idx[i:i + 3])


def assert_outward_ccw(geometry, inside=(0.0, 0.0, 0.0)):
    """Every triangle is non-degenerate and faces away from an interior point."""
    for a, b, c in triangles(geometry):
        n = triangle_normal(a.position, b.position, c.position)
        assert length(n) > 1e-9
        center = tuple((a.position[k] + b.position[k] + c.position[k]) / 3.0 for k in range(3))
        assert dot(n, sub(center, inside)) > 0.0


def assert_normals_agree_with_winding(geometry):
    for tri in triangles(geometry):
        n = triangle_normal(*(v.position for v in tri))
        for v in tri:
            assert dot(n, v.normal) > 0.0


def assert_unit_normals(geometry):
    for v in geometry.vertices:
        assert length(v.normal) == pytest.approx(1.0, abs=NORMAL_TOLERANCE)


def assert_uvs_in_unit_range(geometry):
    for v in geometry.vertices:
        u, w = v.texcoord
        assert 0.0 <= u <= 1.0
        assert 0.0 <= w <= 1.0


def assert_indices_valid(geometry):
    size = geometry.topology.group_size
    assert len(geometry.indices) % size == 0
    assert all(0 <= i < len(geometry.vertices) for i in geometry.indices)


SURFACES = [
    pytest.param(generate_cuboid, id="cuboid"),
    pytest.param(lambda: generate_sphere(3, 2), id="sphere-3x2"),
    pytest.param(lambda: generate_sphere(4, 3), id="sphere-4x3"),
    pytest.param(lambda: generate_sphere(24, 12), id="sphere-24x12"),
    pytest.param(lambda: generate_sphere(7, 5), id="sphere-7x5"),
    pytest.param(lambda: generate_cylinder(3), id="cylinder-3"),
    pytest.param(lambda: generate_cylinder(32), id="cylinder-32"),
    pytest.param(lambda: generate_cone(3), id="cone-3"),
    pytest.param(lambda: generate_cone(17), id="cone-17"),
]


# =============================================================================
# Common properties
# =============================================================================

@pytest.mark.parametrize("make", SURFACES)
def test_closed_shapes_wind_ccw_from_outside(make):
    geometry = make()
    assert geometry.topology is Topology.TRIANGLE_LIST
    assert_indices_valid(geometry)
    assert_outward_ccw(geometry)


@pytest.mark.parametrize("make", SURFACES)
def test_vertex_normals_face_the_same_way_as_triangles(make):
    assert_normals_agree_with_winding(make())


@pytest.mark.parametrize("make", SURFACES + [pytest.param(generate_quad, id="quad")])
def test_normals_are_unit_length(make):
    assert_unit_normals(make())


@pytest.mark.parametrize("make", SURFACES + [pytest.param(generate_quad, id="quad")])
def test_texcoords_in_unit_range(make):
    assert_uvs_in_unit_range(make())


# =============================================================================
# Cuboid
# =============================================================================

def test_cuboid_counts():
    geometry = generate_cuboid()
    assert len(geometry.vertices) == 24
    assert len(geometry.indices) == 36


def test_cuboid_spans_unit_cube():
    for v in generate_cuboid().vertices:
        assert all(abs(abs(c) - 0.5) < 1e-12 for c in v.position)


def test_cuboid_faces_are_flat_and_axis_aligned():
    geometry = generate_cuboid()
    for face in range(6):
        quad = geometry.vertices[face * 4:face * 4 + 4]
        normal = quad[0].normal
        assert all(v.normal == normal for v in quad)
        assert sorted(abs(c) for c in normal) == [0.0, 0.0, 1.0]
        # Every corner lies on the face plane
        for v in quad:
            assert dot(v.position, normal) == pytest.approx(0.5)


def test_cuboid_face_uvs_cover_full_rectangle():
    geometry = generate_cuboid()
    for face in range(6):
        uvs = {v.texcoord for v in geometry.vertices[face * 4:face * 4 + 4]}
        assert uvs == {(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)}


# =============================================================================
# Quad
# =============================================================================

def test_quad_counts_and_normal():
    geometry = generate_quad()
    assert len(geometry.vertices) == 4
    assert len(geometry.indices) == 6
    for v in geometry.vertices:
        assert v.normal == (0.0, 0.0, 1.0)
        assert v.position[2] == 0.0


def test_quad_faces_positive_z():
    for a, b, c in triangles(generate_quad()):
        assert triangle_normal(a.position, b.position, c.position)[2] > 0.0


# =============================================================================
# Sphere
# =============================================================================

@pytest.mark.parametrize("lon,lat", [(3, 2), (4, 4), (24, 12), (5, 9)])
def test_sphere_counts(lon, lat):
    geometry = generate_sphere(lon, lat)
    assert len(geometry.vertices) == sphere_vertex_count(lon, lat)
    assert len(geometry.indices) == sphere_index_count(lon, lat)
    assert len(geometry.indices) == 6 * lon * (lat - 1)


def test_minimum_sphere():
    geometry = generate_sphere(3, 2)
    # 3 + 3 pole vertices, one equator ring of 3 plus seam
    assert len(geometry.vertices) == 10
    # Two pole fans of 3 triangles
    assert len(geometry.indices) == 18


def test_sphere_is_unit_sphere_with_radial_normals():
    for v in generate_sphere(12, 6).vertices:
        assert length(v.position) == pytest.approx(1.0)
        assert v.normal == pytest.approx(v.position)


def test_sphere_poles_are_fans_with_distinct_u():
    lon = 8
    geometry = generate_sphere(lon, 4)
    south = geometry.vertices[:lon]
    assert all(v.position == (0.0, 0.0, -1.0) for v in south)
    assert len({v.texcoord[0] for v in south}) == lon
    assert all(v.texcoord[1] == 0.0 for v in south)

    north = geometry.vertices[-lon:]
    assert all(v.position == (0.0, 0.0, 1.0) for v in north)
    assert all(v.texcoord[1] == 1.0 for v in north)


def test_sphere_seam_duplicates_first_ring_vertex():
    lon = 6
    geometry = generate_sphere(lon, 3)
    ring = geometry.vertices[lon:lon + lon + 1]
    assert ring[0].position == ring[-1].position
    assert ring[0].texcoord[0] == 0.0
    assert ring[-1].texcoord[0] == 1.0


# =============================================================================
# Cylinder / cone
# =============================================================================

@pytest.mark.parametrize("n", [3, 8, 24])
def test_cylinder_counts(n):
    capped = generate_cylinder(n)
    assert len(capped.vertices) == 4 * (n + 1)
    assert len(capped.indices) == 12 * n

    open_tube = generate_cylinder(n, top_cap=False, bottom_cap=False)
    assert len(open_tube.vertices) == 2 * (n + 1)
    assert len(open_tube.indices) == 6 * n


@pytest.mark.parametrize("n", [3, 8, 24])
def test_cone_counts(n):
    capped = generate_cone(n)
    assert len(capped.vertices) == (2 * n + 1) + (n + 1)
    assert len(capped.indices) == 6 * n

    uncapped = generate_cone(n, bottom_cap=False)
    assert len(uncapped.vertices) == 2 * n + 1
    assert len(uncapped.indices) == 3 * n


def test_cylinder_wall_normals_are_radial():
    geometry = generate_cylinder(12, top_cap=False, bottom_cap=False)
    for v in geometry.vertices:
        x, y, z = v.position
        assert v.normal[2] == pytest.approx(0.0)
        assert v.normal == pytest.approx(normalize((x, y, 0.0)))


def test_cone_wall_normals_follow_slant():
    geometry = generate_cone(16, bottom_cap=False)
    base = cone_base_height(16, bottom_cap=False)
    apex = (0.0, 0.0, base + 1.0)
    # Radius 0.5 over height 1: normal ~ (cos, sin, 0.5)
    expected_z = 0.5 / math.sqrt(1.25)
    for v in geometry.vertices:
        assert v.normal[2] == pytest.approx(expected_z)
        # Normal is perpendicular to the generating line from rim to apex
        if v.position[2] == pytest.approx(base):
            line = sub(apex, v.position)
            assert dot(line, v.normal) == pytest.approx(0.0, abs=1e-12)


def test_caps_do_not_share_vertices_with_wall():
    n = 6
    geometry = generate_cylinder(n)
    wall = set(range(2 * (n + 1)))
    cap_triangles = geometry.indices[6 * n:]
    assert not wall.intersection(cap_triangles)
    for i in cap_triangles:
        assert abs(geometry.vertices[i].normal[2]) == 1.0


def test_cylinder_spans_unit_height_and_diameter():
    geometry = generate_cylinder(16)
    zs = [v.position[2] for v in geometry.vertices]
    assert min(zs) == -0.5
    assert max(zs) == 0.5
    for v in geometry.vertices:
        x, y, _ = v.position
        assert math.hypot(x, y) <= 0.5 + 1e-12


# =============================================================================
# Axes
# =============================================================================

def test_axes_are_unit_lines_from_origin():
    geometry = generate_axes()
    assert geometry.topology is Topology.LINE_LIST
    assert len(geometry.vertices) == 6
    assert geometry.indices == [0, 1, 2, 3, 4, 5]

    directions = []
    for i in range(0, 6, 2):
        start, end = geometry.vertices[i], geometry.vertices[i + 1]
        assert start.position == (0.0, 0.0, 0.0)
        direction = sub(end.position, start.position)
        assert length(direction) == 1.0
        assert start.normal == direction
        assert end.normal == direction
        assert start.texcoord == (0.0, 0.0)
        directions.append(direction)

    assert cross(directions[0], directions[1]) == directions[2]


# =============================================================================
# Dispatch
# =============================================================================

@pytest.mark.parametrize("kind,resolution,expected", [
    (ShapeKind.CUBOID, {}, (24, 36)),
    (ShapeKind.QUAD, {}, (4, 6)),
    (ShapeKind.AXES, {}, (6, 6)),
    (ShapeKind.SPHERE, {'longitude_segments': 3, 'latitude_segments': 2}, (10, 18)),
    (ShapeKind.CYLINDER, {'radial_segments': 4}, (20, 48)),
    (ShapeKind.CONE, {'radial_segments': 4}, (14, 24)),
])
def test_generate_dispatches_on_kind(kind, resolution, expected):
    vertices, indices, topology = generate(kind, **resolution)
    assert (len(vertices), len(indices)) == expected


def test_generate_rejects_unknown_kind():
    with pytest.raises(ValueError):
        generate("torus")


# =============================================================================
# Centroid placement
# =============================================================================

def distinct_mean(geometry):
    unique = list(dict.fromkeys(v.position for v in geometry.vertices))
    return tuple(sum(p[k] for p in unique) / len(unique) for k in range(3))


@pytest.mark.parametrize("make", SURFACES + [
    pytest.param(generate_quad, id="quad"),
    pytest.param(lambda: generate_cone(8, bottom_cap=False), id="cone-8-open"),
])
def test_distinct_samples_average_to_origin(make):
    assert distinct_mean(make()) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)


@pytest.mark.parametrize("n,cap,expected", [
    (3, True, -0.2),
    (8, True, -0.1),
    (8, False, -0.5 + 3.5 / 9.0),
])
def test_cone_base_height(n, cap, expected):
    geometry = generate_cone(n, bottom_cap=cap)
    zs = [v.position[2] for v in geometry.vertices]
    assert cone_base_height(n, cap) == pytest.approx(expected)
    assert min(zs) == pytest.approx(expected)
    assert max(zs) == pytest.approx(expected + 1.0)
