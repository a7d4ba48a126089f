[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "protocells"
version = "0.1.0"
description = "A small artificial-life model of organelles, membranes, compound reactions and a grid of sectors."
requires-python = ">=3.10"
dependencies = []
keywords = ["artificial life", "simulation", "chemistry", "neural network", "organelle"]
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
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["protocells"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
