[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslab"
version = "0.1.0"
description = "Classic data structures and algorithms with small interactive menu programs: binary search trees, B-trees, Dijkstra, priority queues and graphs."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "binary search tree",
    "b-tree",
    "dijkstra",
    "priority queue",
    "graph",
    "bfs",
    "dfs",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dslab-bst = "dslab.bst_cli:main"
dslab-btree = "dslab.btree:main"
dslab-dijkstra = "dslab.dijkstra:main"
dslab-hospital = "dslab.hospital:main"
dslab-graph-list = "dslab.graph_list_cli:main"
dslab-graph-matrix = "dslab.matrix_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dslab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"
