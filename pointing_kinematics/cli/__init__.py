"""Command-line interface."""

from pointing_kinematics.cli.arguments import parse_arguments

__all__ = ["parse_arguments"]
