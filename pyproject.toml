[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grafoalg"
version = "0.1.0"
description = "Classic graph algorithms with step-by-step reports: greedy colouring, maximum flow and the Hungarian method."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "coloring",
    "max-flow",
    "min-cut",
    "ford-fulkerson",
    "edmonds-karp",
    "dinic",
    "hungarian",
    "assignment",
    "matching",
]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
grafoalg-coloring = "grafoalg.coloring:main"
grafoalg-greedy-flow = "grafoalg.greedy_flow:main"
grafoalg-ford-fulkerson = "grafoalg.ford_fulkerson:main"
grafoalg-edmonds-karp = "grafoalg.edmonds_karp:main"
grafoalg-dinic = "grafoalg.dinic:main"
grafoalg-hungarian = "grafoalg.hungarian:main"

[tool.hatch.build.targets.wheel]
packages = ["grafoalg"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
