[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "studybench"
version = "0.1.0"
description = "Small study programs: C-style string helpers, classic containers, console games and a contact book"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "data-structures",
    "linked-list",
    "stack",
    "bubble-sort",
    "minesweeper",
    "sokoban",
    "contacts",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
studybench-minesweeper = "studybench.minesweeper:main"
studybench-sokoban = "studybench.sokoban:main"
studybench-contacts = "studybench.contacts.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["studybench"]

[tool.pytest.ini_options]
addopts = "-ra"
