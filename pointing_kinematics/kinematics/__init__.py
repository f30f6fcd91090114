"""Human pointing kinematics: body proportions, kinematic chain and model."""

from pointing_kinematics.kinematics.body import BodyProportions, Handedness
from pointing_kinematics.kinematics.chain import KinematicChain
from pointing_kinematics.kinematics.model import KinematicModel, PointingState, ray_from_points

__all__ = [
    "BodyProportions",
    "Handedness",
    "KinematicChain",
    "KinematicModel",
    "PointingState",
    "ray_from_points",
]
