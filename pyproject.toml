[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eve_anchor"
version = "0.1.0"
description = "Linear-programming planner for planetary resource harvesting across outposts and constellations"
requires-python = ">=3.10"
keywords = ["linear programming", "optimisation", "planetary industry", "harvest planning"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "scipy",
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["eve_anchor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
