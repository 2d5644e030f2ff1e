[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "retroarcade"
version = "0.1.0"
description = "A small arcade cabinet: Snake and Minesweeper on a grid, with display backends you can switch while playing"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["arcade", "snake", "minesweeper", "curses", "pygame", "games"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
retroarcade = "retroarcade.core:main"

[tool.hatch.build.targets.wheel]
packages = ["retroarcade"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
