[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonquest"
version = "0.1.0"
description = "Game logic for a small text role-playing game: items, a player, monsters, turn-based battles and text screens."
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "text-game", "battle", "console", "game-logic"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dungeonquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
