[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "factory_game"
version = "0.1.0"
description = "A small top-down factory game built on an entity-component-system engine"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "ecs", "entity-component-system", "factory", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
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
test = [
    "pytest",
]

[project.scripts]
factory-game = "factory_game.app:main"

[tool.hatch.build.targets.wheel]
packages = ["factory_game"]

[tool.pytest.ini_options]
addopts = "-ra"
