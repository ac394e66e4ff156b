[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fixpoint"
version = "1.0.0"
description = "Signed fixed-point numbers with 8 fractional bits, points, and a point-in-triangle test"
requires-python = ">=3.10"
dependencies = []
keywords = ["fixed-point", "arithmetic", "geometry", "triangle", "point-in-triangle"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
fixpoint = "fixpoint.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fixpoint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
