"""
Prefab Shapes - Main CLI

Builds one shape, uploads it to an in-memory render context and prints
a summary of the generated mesh.

Usage:
    python -m prefab_shapes.main <shape> [options]

Example:
    python -m prefab_shapes.main sphere --longitude 32 --latitude 16 --scale 2 3 4
"""

import argparse
import json
import logging
import math
import sys
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional

from . import __version__
from .adapters.memory import InMemoryAdapter
from .builders import ConeBuilder, CylinderBuilder, ShapeBuilder, SphereBuilder, create_builder
from .config import (
    DEFAULT_LATITUDE_SEGMENTS,
    DEFAULT_LONGITUDE_SEGMENTS,
    DEFAULT_RADIAL_SEGMENTS,
    ShapeKind,
)
from .errors import ShapeCreationError
from .models.mesh import MeshBuffer

logger = logging.getLogger(__name__)


@dataclass
class ShapeReport:
    """Summary of one generated shape."""
    shape: str
    version: str
    vertices: int = 0
    indices: int = 0
    primitives: int = 0
    topology: str = ""
    bounds_min: List[float] = field(default_factory=list)
    bounds_max: List[float] = field(default_factory=list)
    centroid: List[float] = field(default_factory=list)
    config_used: Dict[str, object] = field(default_factory=dict)


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure logging to console and optionally to file.

    Args:
        verbose: If True, use DEBUG level; otherwise INFO
        log_file: Optional path to log file
    """
    level = logging.DEBUG if verbose else logging.INFO

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)


def configure_builder(args: argparse.Namespace) -> ShapeBuilder:
    """
    Create and configure a builder from parsed CLI arguments.

    Args:
        args: Parsed arguments

    Returns:
        Builder in the CONFIGURING state
    """
    builder = create_builder(ShapeKind(args.shape))

    if args.scale is not None:
        builder.scale(*args.scale)
    if args.translate is not None:
        builder.translate(*args.translate)
    if args.rotate is not None:
        builder.orient_euler(*(math.radians(a) for a in args.rotate))

    if isinstance(builder, SphereBuilder):
        builder.with_divisions(args.longitude, args.latitude)
    elif isinstance(builder, CylinderBuilder):
        builder.with_segments(args.segments).with_caps(not args.no_caps, not args.no_caps)
    elif isinstance(builder, ConeBuilder):
        builder.with_segments(args.segments).with_cap(not args.no_caps)

    return builder


def summarize(mesh: MeshBuffer, builder: ShapeBuilder) -> ShapeReport:
    """Collect report statistics for a finished mesh."""
    bounds_min, bounds_max = mesh.compute_bounds()
    config = builder.config

    config_used = {
        'scale': list(config.scale),
        'translation': list(config.translation),
        'orientation': [list(row) for row in config.orientation],
    }
    config_used.update(config.resolution())

    return ShapeReport(
        shape=config.kind.value,
        version=__version__,
        vertices=mesh.vertex_count(),
        indices=mesh.index_count(),
        primitives=mesh.primitive_count(),
        topology=mesh.topology.value,
        bounds_min=list(bounds_min),
        bounds_max=list(bounds_max),
        centroid=list(mesh.centroid()),
        config_used=config_used,
    )


def run(args: argparse.Namespace) -> ShapeReport:
    """
    Build the requested shape and upload it.

    Raises:
        ShapeCreationError: On invalid configuration or upload failure
    """
    builder = configure_builder(args)
    adapter = InMemoryAdapter()

    logger.info(f"Building {args.shape}")
    mesh = builder.build_mesh()
    handle = adapter.upload(mesh.vertices, mesh.indices, mesh.topology)
    logger.info(
        f"Uploaded {args.shape} as handle {handle.handle_id} "
        f"({handle.vertex_count} vertices, {handle.index_count} indices)"
    )

    report = summarize(mesh, builder)
    adapter.close()
    return report


def build_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description='Prefab Shapes - Generate primitive meshes for GPU rendering'
    )

    parser.add_argument(
        'shape',
        choices=[kind.value for kind in ShapeKind],
        help='Shape to generate'
    )

    parser.add_argument(
        '--scale',
        type=float,
        nargs=3,
        metavar=('X', 'Y', 'Z'),
        help='Per-axis scale factors (default: 1 1 1)'
    )

    parser.add_argument(
        '--translate',
        type=float,
        nargs=3,
        metavar=('X', 'Y', 'Z'),
        help='Translation (default: 0 0 0)'
    )

    parser.add_argument(
        '--rotate',
        type=float,
        nargs=3,
        metavar=('X', 'Y', 'Z'),
        help='Euler rotation in degrees, applied X then Y then Z (default: 0 0 0)'
    )

    parser.add_argument(
        '--longitude',
        type=int,
        default=DEFAULT_LONGITUDE_SEGMENTS,
        help=f"Sphere longitude segments (default: {DEFAULT_LONGITUDE_SEGMENTS}, minimum 3)"
    )

    parser.add_argument(
        '--latitude',
        type=int,
        default=DEFAULT_LATITUDE_SEGMENTS,
        help=f"Sphere latitude segments (default: {DEFAULT_LATITUDE_SEGMENTS}, minimum 2)"
    )

    parser.add_argument(
        '--segments',
        type=int,
        default=DEFAULT_RADIAL_SEGMENTS,
        help=f"Cylinder/cone radial segments (default: {DEFAULT_RADIAL_SEGMENTS}, minimum 3)"
    )

    parser.add_argument(
        '--no-caps',
        action='store_true',
        help='Omit cylinder/cone end caps'
    )

    parser.add_argument(
        '--report',
        default=None,
        help='Write a JSON report to this path'
    )

    parser.add_argument(
        '--log-file',
        default=None,
        help='Also write a DEBUG log to this path'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        report = run(args)
    except ShapeCreationError as e:
        logger.error(f"Failed to build {args.shape}: {e}")
        return 1

    print(f"\nGenerated {report.shape}")
    print(f"  Vertices: {report.vertices}")
    print(f"  Indices: {report.indices} ({report.primitives} {report.topology} primitives)")
    print(f"  Bounds: {_fmt(report.bounds_min)} - {_fmt(report.bounds_max)}")
    print(f"  Centroid: {_fmt(report.centroid)}")

    if args.report:
        with open(args.report, 'w', encoding='utf-8') as f:
            json.dump(asdict(report), f, indent=2)
        logger.info(f"Report saved to {args.report}")

    return 0


def _fmt(values: List[float]) -> str:
    return "(" + ", ".join(f"{v:.3f}" for v in values) + ")"


if __name__ == '__main__':
    sys.exit(main())
