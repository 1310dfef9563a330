[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Classic greedy and dynamic-programming exercises: ATM change, TSP, knapsack and number triangle"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "greedy", "dynamic-programming", "knapsack", "tsp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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

[project.scripts]
algolab-atm = "algolab.atm:main"
algolab-tsp = "algolab.tsp:main"
algolab-knapsack = "algolab.knapsack:main"
algolab-triangle = "algolab.triangle:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
