import math

import numpy as np
import pytest

from ur5ik.kinematics import forward_kinematics
from ur5ik.ur5 import InverseKinematicsSolver, Solution, UR5RobotArm, convert_angle

REFERENCE_ANGLES = (0.0, -1.57, 0.9, 0.0, 0.5, 0.0)


def _pose_for(angles):
    arm = UR5RobotArm()
    table = [row[:3] + [angle] for row, angle in zip(arm.dh_table, angles)]
    return forward_kinematics(table)


def _plane_position(angles, theta5):
    chain = [
        (0.0, 0.0, -math.pi / 2.0, angles[0]),
        (42.50, 0.0, 0.0, angles[1]),
        (39.20, 0.0, 0.0, angles[2]),
        (0.0, -10.0, math.pi / 2.0, theta5),
    ]
    t = forward_kinematics(chain)
    return t[0, 3], t[2, 3]


def test_convert_angle_keeps_angles_in_range():
    for angle in (0.0, 0.5, -2.0, math.pi, -math.pi):
        assert convert_angle(angle) == angle


@pytest.mark.parametrize("angle", [3.5, 4.0, 6.0, -3.5, -4.0, -6.0])
def test_convert_angle_folds_into_range(angle):
    result = convert_angle(angle)
    assert -math.pi <= result <= math.pi


def test_default_dh_table():
    arm = UR5RobotArm()
    assert [row[0] for row in arm.dh_table] == [0.0, 0.0, 42.5, 39.2, 0.0, 0.0]
    assert [row[1] for row in arm.dh_table] == [0.0, 13.4, 0.0, 0.0, -10.0, 10.0]
    assert all(row[3] == 0.0 for row in arm.dh_table)
    assert len(arm.angle_limits) == arm.dof == 6


def test_solver_is_abstract():
    with pytest.raises(TypeError):
        InverseKinematicsSolver()


def test_solution_normalises_theta():
    solution = Solution([1, 2, 3, 4, 5, 6])
    assert solution.theta == (1.0, 2.0, 3.0, 4.0, 5.0, 6.0)


def test_is_right_solution_accepts_exact_angles():
    arm = UR5RobotArm()
    pose = _pose_for(REFERENCE_ANGLES)
    assert arm.is_right_solution(Solution(REFERENCE_ANGLES), pose) is True
    assert tuple(row[3] for row in arm.dh_table) == REFERENCE_ANGLES


def test_is_right_solution_rejects_wrong_angles():
    arm = UR5RobotArm()
    pose = _pose_for(REFERENCE_ANGLES)
    wrong = (0.5,) + REFERENCE_ANGLES[1:]
    assert arm.is_right_solution(Solution(wrong), pose) is False


def test_inverse_kinematics_unreachable_pose_gives_nothing():
    assert UR5RobotArm().inverse_kinematics(np.eye(4)) == []


def test_inverse_kinematics_reference_pose():
    arm = UR5RobotArm()
    solutions = arm.inverse_kinematics(_pose_for(REFERENCE_ANGLES))
    assert len(solutions) == 4
    assert all(len(s.theta) == 6 for s in solutions)
    assert solutions[0].theta[0] == pytest.approx(0.0, abs=0.01)
    for first, second in (solutions[0:2], solutions[2:4]):
        assert first.theta[4] == pytest.approx(-second.theta[4])
    for s in solutions:
        for index in (0, 4, 5):
            assert -math.pi <= s.theta[index] <= math.pi
    assert tuple(row[3] for row in arm.dh_table) == solutions[-1].theta


def test_solve_arm_plane_at_start_state_keeps_initial_angles():
    arm = UR5RobotArm()
    result = arm.solve_arm_plane(0.2, 78.6703, -5.27069, 0.0)
    assert result == pytest.approx((-0.2, 0.3, 0.1))
    assert [row[3] for row in arm.dh_table[1:4]] == list(result)


@pytest.mark.parametrize("angles", [(-0.6, 0.7, 0.3), (-1.57, 0.9, 0.0)])
def test_solve_arm_plane_converges(angles):
    theta5 = 0.5
    x, z = _plane_position(angles, theta5)
    arm = UR5RobotArm()
    result = arm.solve_arm_plane(sum(angles), x, z, theta5)
    rx, rz = _plane_position(result, theta5)
    assert abs(rx - x) + abs(rz - z) <= 0.4
    assert sum(result) == pytest.approx(sum(angles), abs=0.06)