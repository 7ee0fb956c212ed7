[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsbench"
version = "0.1.0"
description = "Benchmark a skip list against a red-black tree on randomly generated insert, delete and search workloads"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "skip list", "red-black tree", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsbench = "dsbench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dsbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
