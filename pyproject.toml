[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ucdmesh"
version = "1.0.0"
description = "Export points, segments, polygons and tetrahedra to the AVS UCD ASCII format for ParaView."
requires-python = ">=3.10"
dependencies = []
keywords = ["ucd", "avs", "paraview", "mesh", "export", "visualization"]
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
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ucdmesh = "ucdmesh.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ucdmesh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
