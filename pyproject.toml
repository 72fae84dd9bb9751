[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eilias"
version = "0.1.0"
description = "A small threshold-neuron network with a perturbation-based learning rule and an interactive console."
requires-python = ">=3.10"
dependencies = []
keywords = ["neural network", "neuron", "threshold", "learning", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
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
eilias = "eilias.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["eilias"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
