[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solvebook"
version = "0.1.0"
description = "Solutions to classic algorithm puzzles over arrays, strings, searching, linked lists, grids, combinatorics and greedy problems."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "puzzles",
    "binary-search",
    "dynamic-programming",
    "backtracking",
    "greedy",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
solvebook-ferris-wheel = "solvebook.greedy:ferris_wheel_main"
solvebook-minimizing-coins = "solvebook.greedy:minimizing_coins_main"

[tool.hatch.build.targets.wheel]
packages = ["solvebook"]

[tool.hatch.build.targets.sdist]
include = ["solvebook", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
