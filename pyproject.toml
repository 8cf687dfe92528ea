[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slotsim"
version = "0.1.0"
description = "A console slot machine simulator with reels, minigames and bonus wheels"
requires-python = ">=3.10"
dependencies = []
keywords = ["slot machine", "simulation", "game", "minigames", "wheel"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
slotsim = "slotsim.game:main"

[tool.hatch.build.targets.wheel]
packages = ["slotsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
