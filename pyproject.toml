[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simviz"
version = "0.1.0"
description = "Pure-Python vertex data builders for debug lines, axes, grids, signal traces, voxels and rod meshes"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "mesh", "voxels", "lines", "visualization", "3d"]
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
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["simviz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
