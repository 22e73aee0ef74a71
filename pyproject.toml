[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "voxelcraft"
version = "0.1.0"
description = "Block-world simulation core: chunks, lighting, liquids, raycasting, entities, inventories, meshes and save files"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["voxel", "blocks", "chunks", "sandbox", "game", "simulation"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.setuptools.packages.find]
include = ["voxelcraft*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
