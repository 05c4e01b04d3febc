[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "genalgo"
version = "0.1.0"
description = "A small genetic algorithm that maximises integer objective functions using binary-encoded candidates"
requires-python = ">=3.10"
dependencies = []
keywords = ["genetic algorithm", "optimisation", "evolutionary", "roulette selection", "crossover", "mutation"]
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
genalgo = "genalgo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["genalgo"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
