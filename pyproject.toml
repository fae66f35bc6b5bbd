[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "symmlines"
version = "0.1.0"
description = "Find the lines of symmetry of a finite set of 2D points"
requires-python = ">=3.10"
dependencies = []
keywords = ["symmetry", "geometry", "reflection", "points", "lines"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
symmlines = "symmlines.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["symmlines"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
