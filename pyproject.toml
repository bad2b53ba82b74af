[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fugegga"
version = "0.1.0"
description = "A small cooperative-coevolution genetic algorithm library with fuzzy-system run parameters"
requires-python = ">=3.10"
dependencies = []
keywords = ["genetic algorithm", "coevolution", "evolutionary computation", "fuzzy systems"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fugegga = "fugegga.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fugegga"]

[tool.pytest.ini_options]
addopts = "-ra"
