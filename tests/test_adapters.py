"""
Unit tests for the render adapters.
"""

import numpy as np
import pytest

from prefab_shapes.adapters import BLENDER_AVAILABLE, InMemoryAdapter
from prefab_shapes.builders import CuboidBuilder, SphereBuilder
from prefab_shapes.errors import UploadError
from prefab_shapes.models import Topology, Vertex


def test_upload_returns_distinct_handles(adapter):
    first = CuboidBuilder().build(adapter)
    second = SphereBuilder().with_divisions(4, 3).build(adapter)

    assert first.handle_id != second.handle_id
    assert len(adapter) == 2
    assert adapter.get(second).vertex_count == 18


def test_stored_data_is_interleaved(adapter):
    handle = CuboidBuilder().build(adapter)
    data = adapter.get(handle)
    assert data.stride == 8
    assert data.vertex_data.dtype == np.float32
    assert data.vertex_data.shape == (24 * 8,)
    # First vertex: position, normal, texcoord
    assert data.vertex_data[3:6].tolist() == [1.0, 0.0, 0.0]
    assert len(data.indices) == 36


def test_release_forgets_upload(adapter):
    handle = CuboidBuilder().build(adapter)
    adapter.release(handle)
    assert len(adapter) == 0
    with pytest.raises(KeyError):
        adapter.get(handle)
    # Releasing twice is harmless
    adapter.release(handle)


def test_closed_adapter_rejects_uploads():
    ctx = InMemoryAdapter()
    CuboidBuilder().build(ctx)
    ctx.close()

    assert ctx.closed
    assert len(ctx) == 0
    with pytest.raises(UploadError, match="closed"):
        CuboidBuilder().build(ctx)


def test_invalid_indices_rejected(adapter):
    vertices = [Vertex((0.0, 0.0, 0.0), (0.0, 0.0, 1.0))] * 3
    with pytest.raises(UploadError, match="Invalid mesh data"):
        adapter.upload(vertices, [0, 1, 5], Topology.TRIANGLE_LIST)
    assert len(adapter) == 0


def test_empty_upload_rejected(adapter):
    with pytest.raises(UploadError):
        adapter.upload([], [], Topology.TRIANGLE_LIST)


def test_blender_flag_is_boolean():
    assert isinstance(BLENDER_AVAILABLE, bool)
