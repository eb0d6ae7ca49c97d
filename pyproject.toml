[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "castopt"
version = "0.1.0"
description = "Building blocks for reference-point based many-objective evolutionary optimisation of best-management-practice plans"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "optimization",
    "multi-objective",
    "many-objective",
    "evolutionary-algorithm",
    "nsga-iii",
    "genetic-algorithm",
    "pareto",
    "reference-points",
    "benchmark-problems",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
packages = ["castopt"]

[tool.hatch.build.targets.sdist]
include = ["castopt", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
