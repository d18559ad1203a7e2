[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evolearn"
version = "0.1.0"
description = "Neuro-evolution agents, small neural networks, Q-learning and data-file utilities"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "neuroevolution",
    "neural-network",
    "reinforcement-learning",
    "q-learning",
    "dijkstra",
    "csv",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["evolearn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
