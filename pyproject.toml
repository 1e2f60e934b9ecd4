[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsalab"
version = "0.1.0"
description = "Classic data structures and algorithms: balanced trees, heaps, hash tables, graphs, sorting and word ladders"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "avl-tree",
    "2-3-tree",
    "binary-search-tree",
    "linked-list",
    "heap",
    "hash-table",
    "graph",
    "quicksort",
    "word-ladder",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsalab-tree23 = "dsalab.tree23:main"
dsalab-avl = "dsalab.avl_tree:main"
dsalab-expression = "dsalab.expression:main"
dsalab-bst = "dsalab.bst:main"
dsalab-graph = "dsalab.graph:main"
dsalab-sorting = "dsalab.sorting:main"
dsalab-sentiment = "dsalab.sentiment:main"
dsalab-print-queue = "dsalab.print_queue:main"
dsalab-word-ladder = "dsalab.word_ladder:main"

[tool.hatch.build.targets.wheel]
packages = ["dsalab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
