[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortsearch"
version = "0.1.0"
description = "Sorting and searching algorithms for classic problems, with a small command-line solver"
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = ["algorithms", "sorting", "searching", "greedy", "josephus", "two-pointers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
sortsearch = "sortsearch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sortsearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
