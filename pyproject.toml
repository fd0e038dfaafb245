[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raycube"
version = "0.1.0"
description = "Scene file parsing, map validation and player movement for a grid-based raycasting game"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "maze", "cub", "scene"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["raycube"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
