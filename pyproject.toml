[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deprank"
version = "0.1.0"
description = "Split a dependency DAG into ranks of nodes that can be processed together"
requires-python = ">=3.10"
keywords = ["dag", "dependencies", "graph", "ranking", "topological"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
    "Topic :: Utilities",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
deprank = "deprank.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["deprank"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
