[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pokedsl"
version = "0.1.0"
description = "Generation-aware monster-battling game data, a resolving dex, RON loading and a battle engine core"
requires-python = ">=3.10"
dependencies = []
keywords = ["battle", "dex", "stats", "nature", "generation", "ron", "turn-based"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pokedsl = "pokedsl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pokedsl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
