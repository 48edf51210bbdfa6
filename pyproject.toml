[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sesame"
version = "0.1.0"
description = "Building blocks for stream clustering benchmarks: points, random numbers, queues, timers, offline clustering and evaluation metrics"
requires-python = ">=3.10"
dependencies = []
keywords = ["stream clustering", "benchmark", "kmeans", "dbscan", "purity"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sesame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
