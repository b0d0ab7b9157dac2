"""Inverse kinematics for a UR5-style six-axis arm."""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

from .kinematics import axis_transform, check_solution, forward_kinematics

logger = logging.getLogger(__name__)

# a, d, alpha, theta per joint (lengths in centimetres)
_DEFAULT_DH = (
    (0.0, 0.0, 0.0, 0.0),
    (0.0, 13.40, -math.pi / 2.0, 0.0),
    (42.50, 0.0, 0.0, 0.0),
    (39.20, 0.0, 0.0, 0.0),
    (0.0, -10.0, math.pi / 2.0, 0.0),
    (0.0, 10.0, -math.pi / 2.0, 0.0),
)
_TOOL_OFFSET = 10.0
_SEARCH_STEPS = 1440
_SEARCH_TOLERANCE = 0.2
_MAX_ITERATIONS = 35
_POSITION_TOLERANCE = 0.4
_ANGLE_TOLERANCE = 0.06
_INITIAL_PLANE_STATE = (78.6703, -5.27069, 0.2)
_INITIAL_PLANE_ANGLES = (-0.2, 0.3, 0.1)


def convert_angle(angle: float) -> float:
    """Fold an angle that lies outside [-pi, pi] back into that range."""
    if angle > math.pi:
        return math.pi * 2.0 - angle
    if angle < -math.pi:
        return angle + math.pi * 2.0
    return angle


@dataclass(frozen=True)
class Solution:
    """One set of joint angles, in radians."""

    theta: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "theta", tuple(float(t) for t in self.theta))


class InverseKinematicsSolver(ABC):
    """Something that maps an end-effector pose to candidate joint solutions."""

    dof: int = 0

    @abstractmethod
    def inverse_kinematics(self, end_pose) -> list[Solution]:
        """Return candidate joint solutions reaching end_pose."""


class UR5RobotArm(InverseKinematicsSolver):
    """Six-axis arm whose joint state lives in the theta column of its DH table."""

    dof = 6

    def __init__(self) -> None:
        self.dh_table: list[list[float]] = [list(row) for row in _DEFAULT_DH]
        self.angle_limits: list[list[float]] = [[0.0, 0.0] for _ in range(self.dof)]

    def _set_joint_angles(self, angles) -> None:
        for row, angle in zip(self.dh_table, angles):
            row[3] = float(angle)

    def _joint_angles(self) -> tuple[float, ...]:
        return tuple(float(row[3]) for row in self.dh_table)

    def _base_angle_candidates(self, wrist: np.ndarray) -> list[float]:
        step = math.pi / 720.0
        px, py = float(wrist[0, 3]), float(wrist[1, 3])
        offset = self.dh_table[1][1]
        return sorted(
            angle
            for angle in (step * i for i in range(_SEARCH_STEPS))
            if abs(px * math.cos(angle) + py * math.sin(angle) - offset) < _SEARCH_TOLERANCE
        )

    def inverse_kinematics(self, end_pose) -> list[Solution]:
        """Return up to four joint solutions for end_pose; empty if none is found."""
        tool = np.eye(4)
        tool[2, 3] = _TOOL_OFFSET
        wrist = np.asarray(end_pose, dtype=float) @ np.linalg.inv(tool)

        candidates = self._base_angle_candidates(wrist)
        if not candidates:
            return []

        solutions: list[Solution] = []
        with np.errstate(all="ignore"):
            for base_angle in (candidates[0], candidates[-1]):
                theta1 = base_angle
                if theta1 > math.pi * 1.5:
                    theta1 -= math.pi * 2.0
                theta1 -= math.pi / 2.0

                a, d, alpha, _ = self.dh_table[0]
                local = np.linalg.inv(axis_transform(a, d, alpha, theta1)) @ wrist
                r12 = local[1, 2]

                if r12**2 < 1e-4:
                    logger.debug("wrist axis perpendicular to the base offset; skipped")
                    continue
                if (r12 + 1.0) ** 2 < 1e-3:
                    logger.debug("wrist axis opposite to the base offset; skipped")
                    continue

                sin_magnitude = np.sqrt(local[1, 0] ** 2 + local[1, 1] ** 2)
                for sign in (1.0, -1.0):
                    theta5 = np.arctan2(sign * sin_magnitude, r12)
                    s5 = np.sin(theta5)
                    theta234 = np.arctan2(local[2, 2] / s5, local[0, 2] / -s5)
                    theta6 = np.arctan2(local[1, 1] / -s5, local[1, 0] / s5)

                    self.solve_arm_plane(theta234, local[0, 3], local[2, 3], theta5)
                    theta1 = convert_angle(float(theta1))
                    self.dh_table[0][3] = theta1
                    self.dh_table[4][3] = convert_angle(float(theta5))
                    self.dh_table[5][3] = convert_angle(float(theta6))
                    solutions.append(Solution(self._joint_angles()))
        return solutions

    def is_right_solution(self, solution: Solution, end_pose) -> bool:
        """Apply solution to the arm and tell whether it reaches end_pose."""
        self._set_joint_angles(solution.theta)
        reach_pose = forward_kinematics(self.dh_table)
        return check_solution(end_pose, reach_pose, 4.0, 1.0)

    def solve_arm_plane(self, theta234, x, z, theta5) -> tuple[float, float, float]:
        """Solve joints 2-4 for a wrist position (x, z) and summed angle theta234.

        Runs a Newton iteration, stores the result in the DH table and returns it.
        """
        len1 = abs(self.dh_table[2][0])
        len2 = abs(self.dh_table[3][0])
        len3 = abs(self.dh_table[4][1])

        current = np.array(_INITIAL_PLANE_STATE, dtype=float)
        target = np.array([x, z, theta234], dtype=float)
        angle = np.array(_INITIAL_PLANE_ANGLES, dtype=float)
        jacobian = np.zeros((3, 3))
        jacobian[2, :] = 1.0

        with np.errstate(all="ignore"):
            for k in range(_MAX_ITERATIONS):
                position_error = abs(target[0] - current[0]) + abs(target[1] - current[1])
                angle_error = abs(target[2] - current[2])
                if not (position_error > _POSITION_TOLERANCE or angle_error > _ANGLE_TOLERANCE):
                    logger.debug(
                        "arm plane solved after %d iterations (position error %g, angle error %g)",
                        k + 1,
                        position_error,
                        angle_error,
                    )
                    break

                s0, c0 = np.sin(angle[0]), np.cos(angle[0])
                s01, c01 = np.sin(angle[0] + angle[1]), np.cos(angle[0] + angle[1])
                s012, c012 = np.sin(angle.sum()), np.cos(angle.sum())
                jacobian[0] = [
                    -len1 * s0 - len2 * s01 + len3 * c012,
                    -len2 * s01 + len3 * c012,
                    len3 * c012,
                ]
                jacobian[1] = [
                    -len1 * c0 - len2 * c01 - len3 * s012,
                    -len2 * c01 - len3 * s012,
                    -len3 * s012,
                ]

                try:
                    delta = np.linalg.solve(jacobian, target - current)
                except np.linalg.LinAlgError:
                    delta = np.full(3, np.nan)
                angle = angle + delta

                transform = forward_kinematics(
                    [
                        (0.0, 0.0, -math.pi / 2.0, angle[0]),
                        (42.50, 0.0, 0.0, angle[1]),
                        (39.20, 0.0, 0.0, angle[2]),
                        (0.0, -10.0, math.pi / 2.0, theta5),
                    ]
                )
                current = np.array([transform[0, 3], transform[2, 3], angle.sum()])

        result = tuple(float(v) for v in angle)
        for row, value in zip(self.dh_table[1:4], result):
            row[3] = value
        return result