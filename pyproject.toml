[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minengine"
version = "0.1.0"
description = "Core building blocks of a small real-time rendering engine: events, layers, key codes, time steps, meshes and a parallel-for pool"
requires-python = ">=3.10"
dependencies = []
keywords = ["rendering", "engine", "events", "layers", "mesh", "parallel"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
