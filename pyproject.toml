[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smallcombi"
version = "0.1.0"
description = "Small combinatorial objects: 16-byte vectors, permutations and 8x8 boolean matrices"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "combinatorics",
    "permutations",
    "transformations",
    "boolean matrices",
    "semigroups",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["smallcombi"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
