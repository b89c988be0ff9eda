[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "terrainmetrics"
version = "0.1.0"
description = "Terrain heightfield analysis: interpolation, gradients, normals, peak isolation, ridge extraction and map display helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["terrain", "heightfield", "dem", "geomorphometry", "ridges", "gis"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["terrainmetrics*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
