[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "combatsim"
version = "0.1.0"
description = "A turn-based console combat simulator between two user-created combatants."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "combat", "simulator", "console", "turn-based"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
combatsim = "combatsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["combatsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
