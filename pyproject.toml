[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mag-arena"
version = "0.1.0"
description = "Simulation pieces of a circular-arena shooter: arena, player, enemies, spawning, a four-layer boss, bullets, power-ups, narrative texts and sound hooks."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "shooter", "arena", "simulation"]
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mag_arena"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
