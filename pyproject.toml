[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "nbodybench"
version = "0.1.0"
description = "Random N-body initial conditions and the pure-computation state of an interactive galaxy viewer"
requires-python = ">=3.10"
dependencies = []
keywords = ["n-body", "gravity", "galaxy", "physics", "particles", "sprites"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["nbodybench*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
