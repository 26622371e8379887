[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bvpsolve"
version = "0.1.0"
description = "Balance-method finite-difference solver for a two-point boundary value problem with a discontinuous coefficient, using the tridiagonal sweep method"
requires-python = ">=3.10"
keywords = [
    "boundary value problem",
    "finite differences",
    "balance method",
    "tridiagonal",
    "thomas algorithm",
    "numerical methods",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bvpsolve = "bvpsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bvpsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
