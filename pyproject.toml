[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ponggame"
version = "0.1.0"
description = "Game logic for a two-paddle arcade game: actors, ball physics, menu and level layout, and render buffering."
requires-python = ">=3.10"
dependencies = []
keywords = ["pong", "arcade", "game", "physics"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ponggame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
