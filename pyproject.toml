[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "genutils"
version = "1.0.0"
description = "Generic containers: circular singly and doubly linked lists, a stack and a string-keyed binary search tree."
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "circular list", "stack", "binary tree", "data structures", "containers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["genutils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
