"""Target surfaces intersected by the pointing ray.

This module provides the four surface variants (plane, horizontal plane,
cylinder and sphere) together with their parameter container.
"""

from pointing_kinematics.surfaces.base import Surface, SurfaceObserver, l1_norm
from pointing_kinematics.surfaces.cylinder import Cylinder
from pointing_kinematics.surfaces.factory import SURFACE_TYPES, create_surface, surface_from_config
from pointing_kinematics.surfaces.parameters import ParameterSet, ParameterView
from pointing_kinematics.surfaces.plane import HorizontalPlane, Plane
from pointing_kinematics.surfaces.sphere import Sphere

__all__ = [
    "SURFACE_TYPES",
    "Cylinder",
    "HorizontalPlane",
    "ParameterSet",
    "ParameterView",
    "Plane",
    "Sphere",
    "Surface",
    "SurfaceObserver",
    "create_surface",
    "l1_norm",
    "surface_from_config",
]
