"""Forward and inverse kinematics for a UR5-style six-axis arm, with circle tracking."""

__version__ = "0.1.0"

__all__ = ["kinematics", "ur5", "tracking"]