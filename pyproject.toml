[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tuigeom"
version = "0.1.0"
description = "Integer screen geometry for terminal user interfaces: points, segments, rectangles and frames."
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "tui", "geometry", "layout", "rectangle"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tuigeom"]

[tool.pytest.ini_options]
addopts = "-ra"
