# ur5ik

Kinematics for a UR5-style six-axis arm described by a modified
Denavit–Hartenberg table. Each row of a table is `(a, d, alpha, theta)`.
Lengths are in whatever unit the table uses (the built-in arm's link lengths
are in centimetres), and angles are in radians.

The package provides:

- `ur5ik.kinematics`: link transforms (`axis_transform`), forward kinematics
  over a DH table (`forward_kinematics`), rotation-matrix to quaternion
  conversion (`rotation_to_quaternion`), and a pose comparison
  (`check_solution`).
- `ur5ik.ur5`: the `UR5RobotArm` model, its numerical inverse-kinematics
  solver, the `Solution` record and the `convert_angle` helper.
- `ur5ik.tracking`: a run that moves the end effector along a circle,
  solves inverse kinematics at each step, and reports how often a valid
  solution was found.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Forward kinematics

```python
import numpy as np
from ur5ik.kinematics import axis_transform, forward_kinematics, check_solution

# One link: a, d, alpha, theta
link = axis_transform(42.5, 0.0, 0.0, 0.3)

# A full chain: one row of (a, d, alpha, theta) per joint
dh_table = [
    (0.0, 0.0, 0.0, 0.0),
    (0.0, 13.4, -np.pi / 2, -1.57),
    (42.5, 0.0, 0.0, 0.9),
    (39.2, 0.0, 0.0, 0.0),
    (0.0, -10.0, np.pi / 2, 0.0),
    (0.0, 10.0, -np.pi / 2, 0.0),
]
pose = forward_kinematics(dh_table)   # 4x4 homogeneous matrix (numpy array)

ok = check_solution(pose, pose, 4.0, 1.0)   # True
```

`check_solution(pose, reach_pose, pos_error_upper, rot_error_upper)` sums the
absolute differences of the two translations and returns `True` when that sum
is strictly below `pos_error_upper`. The rotation bound is accepted but not
enforced.

`rotation_to_quaternion` returns a normalised `(x, y, z, w)` tuple.

## Inverse kinematics

```python
from ur5ik.ur5 import UR5RobotArm
from ur5ik.kinematics import forward_kinematics

robot = UR5RobotArm()
target = forward_kinematics(robot.dh_table)

for solution in robot.inverse_kinematics(target):
    if robot.is_right_solution(solution, target):
        print(solution.theta)
        break
```

- `inverse_kinematics(end_pose)` returns a list of up to four `Solution`
  objects, each with a `theta` tuple of six joint angles; the list is empty
  when no base angle is found. Candidates are produced by scanning for the
  base angle, solving the wrist angles in closed form, and refining joints
  2–4 with a Newton iteration (`solve_arm_plane`). Poses whose wrist axis is
  degenerate produce no candidate for that base angle.
- `is_right_solution(solution, end_pose)` writes the solution's angles into
  the arm's DH table, runs forward kinematics, and checks the position with a
  tolerance of 4.0.
- `solve_arm_plane(theta234, x, z, theta5)` returns the three planar joint
  angles and stores them in the DH table.

The arm's joint state is the `theta` column of `robot.dh_table`; both
`inverse_kinematics` and `is_right_solution` change it.

`convert_angle(angle)` folds an angle lying outside `[-pi, pi]` back into
that range.

## Tracking a circle

```python
from ur5ik.tracking import generate_circle, track_circle
from ur5ik.ur5 import UR5RobotArm

point = generate_circle(0.25, 25.0, 0.0, 0.0, 1.0)   # (x, y) on the circle

report = track_circle(UR5RobotArm(), 25.0, 1.0, 15.0, 0.02)
print(f"{report.success_rate():.1f}% of steps planned successfully")
```

`track_circle(robot, radius, t_init, duration, time_step)` starts the arm in
a fixed pose, then from time `t_init` onwards tries to plan a solution at
every step while moving the target around a circle in the x–z plane, until
the time passes `duration`. The returned `TrackingReport` holds `successes`,
`failures`, the per-step `outcomes` and the joint `trajectory`;
`success_rate()` gives a percentage, or `nan` when no attempt was made.

The same run is available from the command line:

```
ur5ik-track
ur5ik-track --radius 20 --t-init 1.0 --duration 15 --time-step 0.02
```

It prints `planning succeeded` or `planning failed` for each step and
finishes with the overall success rate.

## What this package does not do

- There is no physics simulation, viewer or rendering: the tracking run only
  computes joint solutions and counts how many were found.
- Joint angle limits are stored on the arm (`angle_limits`) but are not
  checked by the solver.
- Orientation is not compared when a solution is judged; only position is.