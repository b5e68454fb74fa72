[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "agrobench"
version = "0.1.0"
description = "Agricultural sample records held in several data structures, with a modelled memory benchmark."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "benchmark",
    "data structures",
    "avl tree",
    "skip list",
    "hash table",
    "trie",
    "linked list",
    "agriculture",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["agrobench"]

[tool.hatch.build.targets.sdist]
include = ["agrobench", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
