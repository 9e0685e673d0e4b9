[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hobbykit"
version = "1.0.0"
description = "A grab bag of small utilities: merge sorts, spline curves, grid path finding, SVG gears, PE inspection and APE gain tags"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sorting",
    "hermite",
    "spline",
    "pathfinding",
    "svg",
    "gear",
    "portable-executable",
    "benchmark",
    "ape-tag",
    "replaygain",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hobbykit-spline = "hobbykit.spline:main"
hobbykit-endian = "hobbykit.endian:main"
hobbykit-peid = "hobbykit.peid:main"
hobbykit-sortbench = "hobbykit.sortbench:main"
hobbykit-pathfind = "hobbykit.pathfind:main"
hobbykit-gear = "hobbykit.gear:main"

[tool.hatch.build.targets.wheel]
packages = ["hobbykit"]

[tool.pytest.ini_options]
addopts = "-ra"
