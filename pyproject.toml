[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fantasyteam"
version = "0.1.0"
description = "Pick a fantasy football line-up under budget and formation constraints with greedy, exhaustive or GRASP search"
requires-python = ">=3.10"
keywords = ["fantasy football", "optimisation", "backtracking", "greedy", "simulated annealing", "grasp"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fantasyteam-greedy = "fantasyteam.greedy:main"
fantasyteam-exhaustive = "fantasyteam.exhaustive:main"
fantasyteam-mh = "fantasyteam.metaheuristic:main"

[tool.hatch.build.targets.wheel]
packages = ["fantasyteam"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
