[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkwise"
version = "0.1.0"
description = "Singly linked list algorithms and small data structures: LRU cache, text editor, browser history, hash map and hash set"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linked list",
    "algorithms",
    "data structures",
    "lru cache",
    "text editor",
    "hash map",
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["linkwise"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
