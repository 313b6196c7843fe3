"""
Base shape builder for Prefab Shapes.

A builder collects scale, translation, orientation and shape-specific
resolution settings, then finalizes them into exactly one MeshBuffer.

Lifecycle:
    CONFIGURING --build()/build_mesh()--> SPENT

A builder is spent as soon as finalization starts, whether it succeeds
or fails. Use clone() to retry with the same (or corrected) settings.
"""

from enum import Enum
import logging
from typing import Sequence

from ..config import ShapeConfig, ShapeKind
from ..errors import BuilderSpentError, InvalidTransformError
from ..generators import GeometryData, generate
from ..models.mesh import MeshBuffer
from ..models.vertex import Topology, Vertex
from ..utils.math_utils import (
    IDENTITY3,
    add,
    as_mat3,
    diagonal,
    hadamard,
    inverse,
    mat_mul,
    mat_vec,
    normalize,
    rotation_from_axis_angle,
    rotation_from_euler,
    transpose,
)

logger = logging.getLogger(__name__)


class BuilderState(Enum):
    """Lifecycle state of a builder."""
    CONFIGURING = "configuring"
    SPENT = "spent"


class ShapeBuilder:
    """
    Fluent configuration for one shape family.

    Every configuration method returns the builder and overwrites the
    previous value (calling it twice with the same arguments changes
    nothing). Values are validated when the builder is finalized.

    The resulting geometry suits OpenGL defaults: right-handed
    coordinates, front faces counter-clockwise.

    Subclasses set `kind` and override _resolution_settings().
    """

    kind: ShapeKind = None

    def __init__(self):
        self._scale = (1.0, 1.0, 1.0)
        self._translation = (0.0, 0.0, 0.0)
        self._orientation = IDENTITY3
        self._state = BuilderState.CONFIGURING

    # -------------------------------------------------------------------------
    # Transform configuration
    # -------------------------------------------------------------------------

    def scale(self, x: float, y: float, z: float) -> 'ShapeBuilder':
        """
        Set the per-axis scale factors (default 1, 1, 1).

        Zero is rejected at build time. Negative factors mirror the shape;
        triangle winding is corrected so faces stay front-facing.
        """
        self._ensure_configuring()
        self._scale = (x, y, z)
        return self

    def translate(self, x: float, y: float, z: float) -> 'ShapeBuilder':
        """Set the translation applied after scale and orientation (default 0, 0, 0)."""
        self._ensure_configuring()
        self._translation = (x, y, z)
        return self

    def orient(self, rotation: Sequence[Sequence[float]]) -> 'ShapeBuilder':
        """
        Set the orientation as a row-major 3x3 rotation matrix (default identity).

        Must be a proper rotation; reflections belong in scale().
        """
        self._ensure_configuring()
        try:
            rotation = tuple(tuple(row) for row in rotation)
        except TypeError:
            # Not a nested sequence; ShapeConfig rejects it at build time
            pass
        self._orientation = rotation
        return self

    def orient_euler(self, x: float, y: float, z: float) -> 'ShapeBuilder':
        """Set the orientation from Euler angles in radians (X, then Y, then Z)."""
        self._ensure_configuring()
        self._orientation = rotation_from_euler(x, y, z)
        return self

    def orient_axis_angle(
        self, axis: Sequence[float], radians: float
    ) -> 'ShapeBuilder':
        """Set the orientation as a rotation of `radians` about `axis`."""
        self._ensure_configuring()
        try:
            self._orientation = rotation_from_axis_angle(tuple(axis), radians)
        except ValueError as e:
            raise InvalidTransformError(f"Invalid rotation axis {axis}: {e}") from e
        return self

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def state(self) -> BuilderState:
        """Current lifecycle state."""
        return self._state

    @property
    def is_spent(self) -> bool:
        """True once the builder has been finalized."""
        return self._state is BuilderState.SPENT

    def settings(self) -> dict:
        """
        Raw, unvalidated settings (available in any state for diagnostics).
        """
        settings = {
            'kind': self.kind,
            'scale': self._scale,
            'translation': self._translation,
            'orientation': self._orientation,
        }
        settings.update(self._resolution_settings())
        return settings

    def resolve(self) -> ShapeConfig:
        """
        Validate the settings into a ShapeConfig.

        Raises:
            ConfigurationError: If any setting is invalid
        """
        return ShapeConfig(**self.settings())

    @property
    def config(self) -> ShapeConfig:
        """Resolved configuration (any state; raises like resolve())."""
        return self.resolve()

    def clone(self) -> 'ShapeBuilder':
        """Copy the settings into a new builder in the CONFIGURING state."""
        other = type(self)()
        other._scale = self._scale
        other._translation = self._translation
        other._orientation = self._orientation
        other._copy_resolution_from(self)
        return other

    # -------------------------------------------------------------------------
    # Finalization
    # -------------------------------------------------------------------------

    def build_mesh(self) -> MeshBuffer:
        """
        Finalize into a MeshBuffer without uploading it.

        Useful for unit testing or further processing.

        Raises:
            BuilderSpentError: If the builder was already finalized
            ConfigurationError: If the settings are invalid
        """
        self._ensure_configuring()
        self._state = BuilderState.SPENT

        config = self.resolve()
        logger.debug(f"Building {config.kind.value}: {config}")

        geometry = generate(config.kind, **config.resolution())
        mesh = transform_geometry(geometry, config)

        logger.debug(
            f"Built {mesh!r}" + (" (mirrored, winding reversed)" if config.mirrored else "")
        )
        return mesh

    def build(self, adapter):
        """
        Finalize and upload through a render adapter.

        Args:
            adapter: Render adapter (see adapters.RenderAdapter)

        Returns:
            Whatever the adapter's upload() returns (a renderable handle)

        Raises:
            BuilderSpentError: If the builder was already finalized
            ConfigurationError: If the settings are invalid (nothing is uploaded)
            UploadError: Propagated unchanged from the adapter
        """
        mesh = self.build_mesh()
        return adapter.upload(mesh.vertices, mesh.indices, mesh.topology)

    # -------------------------------------------------------------------------
    # Subclass hooks
    # -------------------------------------------------------------------------

    def _resolution_settings(self) -> dict:
        """Shape-specific ShapeConfig fields."""
        return {}

    def _copy_resolution_from(self, other: 'ShapeBuilder') -> None:
        """Copy shape-specific settings from another builder of the same type."""
        pass

    def _ensure_configuring(self) -> None:
        if self._state is BuilderState.SPENT:
            raise BuilderSpentError(
                f"{type(self).__name__} has already been built; use clone() to build again"
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state={self._state.value})"


def transform_geometry(geometry: GeometryData, config: ShapeConfig) -> MeshBuffer:
    """
    Apply a configuration's transform to unit geometry.

    position' = R (s ⊙ p) + t
    normal'   = normalize((R S)^-T n)

    When the scale mirrors the shape (negative determinant) each triangle's
    winding is reversed so it stays counter-clockwise from outside.

    Args:
        geometry: Unit shape from the geometry kernel
        config: Validated configuration

    Returns:
        Immutable MeshBuffer
    """
    rotation = as_mat3(config.orientation)
    scale = tuple(float(s) for s in config.scale)
    translation = tuple(float(t) for t in config.translation)

    linear = mat_mul(rotation, diagonal(*scale))
    normal_matrix = transpose(inverse(linear))

    vertices = tuple(
        Vertex(
            position=add(mat_vec(rotation, hadamard(scale, v.position)), translation),
            normal=normalize(mat_vec(normal_matrix, v.normal)),
            texcoord=v.texcoord,
        )
        for v in geometry.vertices
    )

    indices = list(geometry.indices)
    if config.mirrored and geometry.topology is Topology.TRIANGLE_LIST:
        for i in range(0, len(indices), 3):
            indices[i + 1], indices[i + 2] = indices[i + 2], indices[i + 1]

    return MeshBuffer(
        vertices=vertices,
        indices=tuple(indices),
        topology=geometry.topology,
        kind=config.kind,
    )
