[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsacollections"
version = "0.1.0"
description = "Container data structures with cursor iterators: a sorted indexed list, a hash-table bag, a bit-array set and a binary-search-tree sorted map."
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "bag", "multiset", "sorted list", "sorted map", "binary search tree", "bit array", "set", "iterator"]
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
packages = ["dsacollections"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
