[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trinkit"
version = "0.1.0"
description = "Game-side math and logic toolkit: vectors, matrices, quaternions, easing, timers, scenes and spawn tables."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "math", "vector", "matrix", "quaternion", "easing", "scene", "timer"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["trinkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
