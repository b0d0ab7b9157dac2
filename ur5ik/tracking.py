"""Track a circular end-effector path with the UR5 inverse kinematics."""

from __future__ import annotations

import argparse
import dataclasses
import math
from dataclasses import dataclass, field

from .kinematics import forward_kinematics
from .ur5 import Solution, UR5RobotArm

_ARM_START = (0.0, -1.57, 0.9, 0.0, 0.0, 0.0)
_JOINT_START = (0.0, -1.5708, 0.9, 0.0, 0.0, 0.0)


def generate_circle(time, radius, x, y, angular_velocity) -> tuple[float, float]:
    """Point on a circle around (x, y) at the given time, in turns per unit time."""
    phase = 2.0 * math.pi * time * angular_velocity
    return x + radius * math.cos(phase), y + radius * math.sin(phase)


@dataclass
class TrackingReport:
    """Outcome of a tracking run."""

    successes: int = 0
    failures: int = 0
    outcomes: list[bool] = field(default_factory=list)
    trajectory: list[tuple[float, ...]] = field(default_factory=list)

    def success_rate(self) -> float:
        """Percentage of planning attempts that succeeded (nan when none were made)."""
        total = self.successes + self.failures
        if total == 0:
            return math.nan
        return self.successes / total * 100.0


def track_circle(robot: UR5RobotArm, radius=25.0, t_init=1.0, duration=15.0, time_step=0.02):
    """Plan joint solutions along a circle in the x-z plane and report the results."""
    for row, angle in zip(robot.dh_table, _ARM_START):
        row[3] = angle
    pose = forward_kinematics(robot.dh_table)
    centre_x = pose[0, 3] - radius
    centre_z = pose[2, 3]

    report = TrackingReport()
    joints = Solution(_JOINT_START)
    time = 0.0
    while True:
        time += time_step
        report.trajectory.append(joints.theta)

        if time >= t_init:
            accepted = next(
                (s for s in robot.inverse_kinematics(pose) if robot.is_right_solution(s, pose)),
                None,
            )
            if accepted is not None:
                theta = list(accepted.theta)
                theta[4] = -theta[4]
                joints = dataclasses.replace(accepted, theta=tuple(theta))
                report.successes += 1
            else:
                report.failures += 1
            report.outcomes.append(accepted is not None)

            new_x, new_z = generate_circle(time - t_init, radius, centre_x, centre_z, 1.0)
            pose[0, 3] = new_x
            pose[2, 3] = new_z

        if time > duration:
            break
    return report


def main(argv=None) -> int:
    """Run the circle-tracking experiment and print its success rate."""
    parser = argparse.ArgumentParser(description="Track a circle with UR5 inverse kinematics.")
    parser.add_argument("--radius", type=float, default=25.0)
    parser.add_argument("--t-init", type=float, default=1.0)
    parser.add_argument("--duration", type=float, default=15.0)
    parser.add_argument("--time-step", type=float, default=0.02)
    args = parser.parse_args(argv)

    report = track_circle(UR5RobotArm(), args.radius, args.t_init, args.duration, args.time_step)
    for succeeded in report.outcomes:
        print("planning succeeded" if succeeded else "planning failed")
    print(f"planning success rate {report.success_rate()}%")
    return 0