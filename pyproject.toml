[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jscore"
version = "0.1.0"
description = "JavaScript syntax trees, JSON encoding, a bytecode generator and memory-management primitives"
requires-python = ">=3.10"
dependencies = []
keywords = ["javascript", "ast", "bytecode", "visitor", "garbage-collection"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jscore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
