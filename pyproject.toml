[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solvedkit"
version = "0.1.0"
description = "Solved algorithm challenges: linked lists, trees, tries, disjoint sets, graphs, grids, arrays, sorting, searching and string puzzles."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "challenges", "graphs", "trees", "tries", "sorting", "searching"]
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
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["solvedkit"]

[tool.pytest.ini_options]
addopts = "-ra"
