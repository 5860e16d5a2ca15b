[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raplab"
version = "0.1.0"
description = "Graph search and path planning: sparse, dense, grid and hybrid graphs, Dijkstra, A* and space-time A*, with MovingAI benchmark readers."
requires-python = ">=3.10"
keywords = [
    "path planning",
    "pathfinding",
    "a-star",
    "dijkstra",
    "graph search",
    "grid",
    "movingai",
    "space-time search",
    "avl tree",
]
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
dependencies = [
    "numpy",
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
raplab-animate-astar = "raplab.animation:main_astar"
raplab-animate-astar-time = "raplab.animation:main_astar_time"

[tool.hatch.build.targets.wheel]
packages = ["raplab"]

[tool.hatch.build.targets.sdist]
include = [
    "raplab",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
