[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pushswap"
version = "1.0.0"
description = "Sort integers using two stacks and a small set of stack operations, printing the operations used."
requires-python = ">=3.10"
keywords = ["push_swap", "stack", "sorting", "radix sort", "puzzle"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Education",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pushswap = "pushswap.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pushswap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
