[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "collisionkit"
version = "0.1.0"
description = "Collision detection building blocks: planes, frustums, line segments, contacts, bounding volume tree nodes and broad phase algorithms."
requires-python = ">=3.10"
dependencies = []
keywords = ["collision", "geometry", "plane", "frustum", "culling", "bvh", "broad-phase", "sweep-and-prune"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["collisionkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
