"""Configuration loading and validation."""

from pointing_kinematics.config.config_manager import ConfigManager

__all__ = ["ConfigManager"]
