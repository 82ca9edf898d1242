[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "combalgs"
version = "0.1.0"
description = "Combinatorial algorithms: articulation points, bamboo garden trimming and divide-and-conquer triangulation"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphs", "articulation points", "dfs", "delaunay", "triangulation", "scheduling"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
combalgs-graph = "combalgs.graph_cli:main"
combalgs-bamboo = "combalgs.bamboo:main"

[tool.hatch.build.targets.wheel]
packages = ["combalgs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
