[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tavernquest"
version = "0.1.0"
description = "Fantasy tavern characters: character classes, a fixed-capacity bag, a tavern roster loaded from CSV, and a doubly linked list."
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "tavern", "characters", "game", "linked-list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tavernquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
