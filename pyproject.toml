[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ur5ik"
version = "0.1.0"
description = "Forward and inverse kinematics for a UR5-style six-axis arm, with a circular path-tracking run"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "robotics",
    "kinematics",
    "inverse-kinematics",
    "denavit-hartenberg",
    "ur5",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ur5ik-track = "ur5ik.tracking:main"

[tool.hatch.build.targets.wheel]
packages = ["ur5ik"]

[tool.pytest.ini_options]
addopts = "-ra"
