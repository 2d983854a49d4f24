[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memorpg"
version = "1.0.0"
description = "A turn-based memory labyrinth game for two to four players in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "memory", "labyrinth", "terminal", "board-game", "multiplayer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
memorpg = "memorpg.game:main"

[tool.hatch.build.targets.wheel]
packages = ["memorpg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
