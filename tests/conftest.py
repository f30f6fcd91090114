"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from pointing_kinematics.surfaces import HorizontalPlane
from pointing_kinematics.transform import RigidTransform


@pytest.fixture
def floor() -> HorizontalPlane:
    """Return a horizontal plane at z=0."""

    return HorizontalPlane(point=(0.0, 0.0, 0.0))


@pytest.fixture
def downward_ray() -> RigidTransform:
    """Return a ray at (0, 0, 1) pointing straight down."""

    return RigidTransform.from_rpy(pitch=0.5 * 3.141592653589793, origin=(0.0, 0.0, 1.0))


@pytest.fixture
def config_yaml(tmp_path: Path) -> Path:
    """Return the path to a valid YAML configuration file."""

    path = tmp_path / "config.yaml"
    path.write_text(
        "\n".join(
            [
                "body:",
                "  height_m: 1.835",
                "  handedness: right",
                "surface:",
                "  type: horizontal_plane",
                "  point: [0.0, 0.0, 0.0]",
                "output:",
                f"  directory: {tmp_path / 'output'}",
                "  format: json",
            ]
        ),
        encoding="utf-8",
    )
    return path
