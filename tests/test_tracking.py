import math

import pytest

from ur5ik.tracking import TrackingReport, generate_circle, main, track_circle
from ur5ik.ur5 import UR5RobotArm


@pytest.mark.parametrize("time", [0.0, 0.1, 0.37, 0.5, 0.9])
def test_generate_circle_stays_on_radius(time):
    px, py = generate_circle(time, 25.0, 3.0, -4.0, 1.0)
    assert math.hypot(px - 3.0, py + 4.0) == pytest.approx(25.0)


def test_generate_circle_starts_on_positive_x_axis():
    px, py = generate_circle(0.0, 25.0, 3.0, -4.0, 1.0)
    assert px - 3.0 == pytest.approx(25.0)
    assert py == pytest.approx(-4.0)


def test_generate_circle_is_periodic():
    first = generate_circle(0.3, 10.0, 1.0, 2.0, 2.0)
    later = generate_circle(0.8, 10.0, 1.0, 2.0, 2.0)
    assert later == pytest.approx(first)


def test_success_rate():
    assert TrackingReport(successes=3, failures=1).success_rate() == pytest.approx(75.0)


def test_success_rate_without_attempts_is_nan():
    rate = TrackingReport().success_rate()
    assert str(float(rate)) == "nan"


def test_track_circle_before_start_time_makes_no_attempts():
    report = track_circle(UR5RobotArm(), 25.0, 2.0, 1.0, 0.25)
    assert report.outcomes == []
    assert len(report.trajectory) == 5
    assert all(t == (0.0, -1.5708, 0.9, 0.0, 0.0, 0.0) for t in report.trajectory)


def test_track_circle_counts_attempts():
    report = track_circle(UR5RobotArm(), 25.0, 0.5, 1.0, 0.25)
    assert len(report.outcomes) == 4
    assert report.successes + report.failures == 4
    assert report.successes == sum(report.outcomes)
    assert len(report.trajectory) == 5
    assert 0.0 <= report.success_rate() <= 100.0


def test_main_prints_one_line_per_attempt(capsys):
    assert main(["--duration", "1.0", "--time-step", "0.25", "--t-init", "0.5"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert sum(line.startswith("planning succeeded") or line.startswith("planning failed") for line in lines) == 4
    assert lines[-1].startswith("planning success rate")