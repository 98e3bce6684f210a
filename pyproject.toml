[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacedomain"
version = "0.1.0"
description = "Entity world, sectors, orbits and navigation planning for a space trading simulation"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "game", "ecs", "pathfinding", "space"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spacedomain"]

[tool.pytest.ini_options]
addopts = "-ra"
