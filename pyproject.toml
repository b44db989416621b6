[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heistkit"
version = "0.1.0"
description = "Gameplay logic for a co-operative heist shooter: health and armour, keycards, money pickups, surveillance cameras and HUD state."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "heist", "gameplay", "health", "armour", "hud", "keycard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["heistkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
