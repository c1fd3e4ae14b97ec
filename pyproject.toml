[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flowfield"
version = "0.1.0"
description = "Flow field pathfinding with flocking enemies, turrets and an interactive pygame visualization"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["pathfinding", "flow field", "dijkstra", "steering", "flocking", "tower defense", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
flowfield = "flowfield.app:main"

[tool.hatch.build.targets.wheel]
packages = ["flowfield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
