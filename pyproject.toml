[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pacgraph"
version = "0.1.0"
description = "A maze-chase arcade game in which four monsters hunt the player with different greedy strategies on a graph of the maze"
requires-python = ">=3.10"
dependencies = []
keywords = ["arcade", "game", "maze", "greedy", "graph", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pacgraph = "pacgraph.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pacgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
