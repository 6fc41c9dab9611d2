[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dmalgebra"
version = "0.1.0"
description = "Exact integer and rational arithmetic with an interactive menu calculator"
requires-python = ">=3.10"
dependencies = []
keywords = ["algebra", "integers", "rationals", "fractions", "discrete mathematics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dmalgebra = "dmalgebra.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dmalgebra"]

[tool.pytest.ini_options]
addopts = "-ra"
