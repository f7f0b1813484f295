[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arenagame"
version = "0.1.0"
description = "Game logic for a small 3D action role-playing game: input, stage collision, warps, data tables and menu scene flow."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "scenes", "collision", "input", "csv"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arenagame"]

[tool.hatch.build.targets.sdist]
include = ["arenagame", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
