"""Homogeneous transforms and forward kinematics for modified DH chains."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np


def axis_transform(a, d, alpha, theta):
    """Return the 4x4 link transform for modified DH parameters (a, d, alpha, theta)."""
    st, ct = np.sin(theta), np.cos(theta)
    sa, ca = np.sin(alpha), np.cos(alpha)
    return np.array(
        [
            [ct, -st, 0.0, a],
            [st * ca, ct * ca, -sa, -sa * d],
            [st * sa, ct * sa, ca, ca * d],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=float,
    )


def forward_kinematics(dh_table: Iterable[Sequence[float]]) -> np.ndarray:
    """Chain the link transforms of every (a, d, alpha, theta) row into one pose."""
    end_to_base = np.eye(4)
    for a, d, alpha, theta in dh_table:
        end_to_base = end_to_base @ axis_transform(a, d, alpha, theta)
    return end_to_base


def rotation_to_quaternion(rotation) -> tuple[float, float, float, float]:
    """Convert a 3x3 rotation matrix to a normalised quaternion (x, y, z, w)."""
    m = np.asarray(rotation, dtype=float)[:3, :3]
    trace = m[0, 0] + m[1, 1] + m[2, 2]
    q = [0.0, 0.0, 0.0]
    if trace > 0.0:
        t = np.sqrt(trace + 1.0)
        w = 0.5 * t
        t = 0.5 / t
        q = [(m[2, 1] - m[1, 2]) * t, (m[0, 2] - m[2, 0]) * t, (m[1, 0] - m[0, 1]) * t]
    else:
        i = 0
        if m[1, 1] > m[0, 0]:
            i = 1
        if m[2, 2] > m[i, i]:
            i = 2
        j = (i + 1) % 3
        k = (j + 1) % 3
        t = np.sqrt(m[i, i] - m[j, j] - m[k, k] + 1.0)
        q[i] = 0.5 * t
        t = 0.5 / t
        w = (m[k, j] - m[j, k]) * t
        q[j] = (m[j, i] + m[i, j]) * t
        q[k] = (m[k, i] + m[i, k]) * t
    values = np.array([q[0], q[1], q[2], w], dtype=float)
    values /= np.linalg.norm(values)
    return tuple(float(v) for v in values)


def check_solution(pose, reach_pose, pos_error_upper, rot_error_upper) -> bool:
    """Tell whether reach_pose lies close enough to pose.

    The position error is the sum of absolute coordinate differences and must be
    strictly below pos_error_upper. The rotation tolerance is accepted but not
    enforced.
    """
    target = np.asarray(pose, dtype=float)
    reached = np.asarray(reach_pose, dtype=float)
    pos_error = float(np.sum(np.abs(target[:3, 3] - reached[:3, 3])))
    return bool(pos_error < pos_error_upper)