[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pacman_console"
version = "0.1.0"
description = "A small Pac-Man style maze game for the terminal"
requires-python = ">=3.10"
keywords = ["pacman", "game", "terminal", "console", "arcade", "maze"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
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
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pacman-console = "pacman_console.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pacman_console"]

[tool.pytest.ini_options]
addopts = "-ra"
