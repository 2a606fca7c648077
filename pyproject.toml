[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ninjalite"
version = "0.1.0"
description = "Build-tool building blocks: Makefile depfile parsing, file-system access and edit distance"
requires-python = ">=3.10"
dependencies = []
keywords = ["build", "depfile", "dependencies", "make", "edit-distance"]
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
packages = ["ninjalite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
