[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "carcasonne"
version = "0.1.0"
description = "A terminal tile-laying board game engine with a text renderer"
requires-python = ">=3.10"
dependencies = []
keywords = ["board game", "tiles", "terminal", "game engine", "state machine"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
carcasonne = "carcasonne.app:main"

[tool.hatch.build.targets.wheel]
packages = ["carcasonne"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
