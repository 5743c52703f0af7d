[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crisscross"
version = "0.1.0"
description = "A CrissCross puzzle game: fill a 5x5 board with pairs of symbols and score adjacent runs"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "puzzle", "crisscross", "pygame", "board"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
crisscross = "crisscross.game:main"

[tool.hatch.build.targets.wheel]
packages = ["crisscross"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
