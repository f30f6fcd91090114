"""Utility modules for the pointing kinematics system."""

from pointing_kinematics.utils.export_utils import PointingExporter
from pointing_kinematics.utils.logging_utils import setup_logging
from pointing_kinematics.utils.sample_loader import load_orientation_samples

__all__ = [
    "PointingExporter",
    "load_orientation_samples",
    "setup_logging",
]
