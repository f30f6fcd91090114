"""Rigid transform algebra used by the kinematic chain and surfaces."""

from pointing_kinematics.transform.rigid_transform import RigidTransform, as_vector3

__all__ = [
    "RigidTransform",
    "as_vector3",
]
