[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "probset"
version = "0.1.0"
description = "Solutions to a numbered set of algorithmic programming problems, as a library and a command."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "competitive-programming", "problem-set", "dynamic-programming", "graphs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
probset = "probset.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["probset"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
