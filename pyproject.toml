[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estruturas"
version = "0.1.0"
description = "Interactive teaching programs for stacks, queues, linked lists and graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "stack", "queue", "linked list", "graph", "dfs", "teaching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
estruturas = "estruturas.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["estruturas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
