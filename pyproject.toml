[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seaconsole"
version = "0.1.0"
description = "Console front end for a sea battle game: a key-driven task menu, a text buffer and positioned terminal output"
requires-python = ">=3.10"
dependencies = []
keywords = ["sea battle", "battleship", "console", "terminal", "game", "menu"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
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
seaconsole = "seaconsole.app:main"

[tool.hatch.build.targets.wheel]
packages = ["seaconsole"]

[tool.pytest.ini_options]
addopts = "-ra"
