[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pracollections"
version = "0.1.0"
description = "Classic data structures and algorithms: lists, dictionaries, search trees, searching, sorting, dynamic programming and a small URL shortener."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "linked list",
    "hash table",
    "binary search tree",
    "sorting",
    "dynamic programming",
    "url shortener",
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
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pracollections-robot = "pracollections.robot:main"
pracollections-sort = "pracollections.sorting:main"
pracollections-shortener = "pracollections.shortener:main"

[tool.hatch.build.targets.wheel]
packages = ["pracollections"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
