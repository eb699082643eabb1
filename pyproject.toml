[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ssspath"
version = "0.1.0"
description = "Single-source shortest paths with Dijkstra's algorithm, driven by a small query language"
requires-python = ">=3.10"
dependencies = []
keywords = ["dijkstra", "shortest-path", "graph", "min-heap", "sssp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
ssspath = "ssspath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ssspath"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
