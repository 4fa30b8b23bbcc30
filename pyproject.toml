[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "planar3d"
version = "0.20.1"
description = "Three-dimensional planes: construction, normalisation, approximate equality and intersection with rays and other planes"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "plane", "ray", "intersection", "3d", "vector"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["planar3d"]

[tool.pytest.ini_options]
addopts = "-ra"
