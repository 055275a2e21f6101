[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pointcluster"
version = "0.5.0"
description = "Crisp (hard c-means) and fuzzy c-means clustering of two-dimensional point sets, with plotting helpers."
requires-python = ">=3.10"
dependencies = [
    "matplotlib",
]
keywords = ["clustering", "fuzzy c-means", "c-means", "points", "data analysis"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pointcluster = "pointcluster.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pointcluster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
