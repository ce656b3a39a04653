[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cargoconf"
version = "0.1.0"
description = "Discover Cargo configuration files, merge configuration layers and track where values were defined."
requires-python = ">=3.10"
dependencies = []
keywords = ["cargo", "config", "configuration", "rust", "build"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cargoconf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
