[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "torneo"
version = "1.0.0"
description = "Interactive console manager for a small round-robin tournament: players, games and results"
requires-python = ">=3.10"
keywords = ["tournament", "round-robin", "console", "menu", "players", "graph"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
torneo = "torneo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["torneo"]

[tool.pytest.ini_options]
addopts = "-ra"
