"""Pointing Kinematics

Human pointing ray estimation from body height and IMU orientation,
intersected with plane, cylinder and sphere target surfaces.
"""

__version__ = "0.1.0"

# Configuration
from pointing_kinematics.config import ConfigManager

# Errors
from pointing_kinematics.errors import (
    ArityMismatchError,
    LockedParameterError,
    MissingParameterError,
    PointingKinematicsError,
    UnknownParameterError,
)

# Kinematics
from pointing_kinematics.kinematics import (
    BodyProportions,
    Handedness,
    KinematicChain,
    KinematicModel,
    PointingState,
)

# Surfaces
from pointing_kinematics.surfaces import (
    Cylinder,
    HorizontalPlane,
    ParameterSet,
    Plane,
    Sphere,
    Surface,
)

# Transform
from pointing_kinematics.transform import RigidTransform

__all__ = [
    "ArityMismatchError",
    "BodyProportions",
    "ConfigManager",
    "Cylinder",
    "Handedness",
    "HorizontalPlane",
    "KinematicChain",
    "KinematicModel",
    "LockedParameterError",
    "MissingParameterError",
    "ParameterSet",
    "Plane",
    "PointingKinematicsError",
    "PointingState",
    "RigidTransform",
    "Sphere",
    "Surface",
    "UnknownParameterError",
]
