[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyfield"
version = "0.1.0"
description = "A small top-down field game built on an entity store with generational keys"
requires-python = ">=3.10"
keywords = ["game", "pygame", "entities", "arcade", "ecs"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tinyfield = "tinyfield.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyfield"]

[tool.pytest.ini_options]
addopts = "-ra"
