[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wolfcast"
version = "0.1.0"
description = "Grid-map raycasting core with XPM texture reading, TNT explosions and distance shading"
requires-python = ">=3.10"
dependencies = []
keywords = ["raycasting", "xpm", "game", "grid-map", "first-person"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wolfcast"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
