[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cses-kit"
version = "0.1.0"
description = "Solutions to classic competitive-programming problems: dynamic programming, graphs, mazes and string algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "dynamic-programming",
    "knapsack",
    "graphs",
    "shortest-path",
    "bfs",
    "z-function",
    "manacher",
    "string-hashing",
    "competitive-programming",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cses-kit = "cses_kit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cses_kit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 110
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
