[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsakit"
version = "0.1.0"
description = "Classic data structures and algorithms: hashing, search trees, expression trees, graph traversal and spanning trees"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "hash-table",
    "binary-search-tree",
    "avl-tree",
    "expression-tree",
    "graph",
    "bfs",
    "dfs",
    "prim",
    "optimal-bst",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsakit-telephone-book = "dsakit.telephone_book:main"
dsakit-book-tree = "dsakit.book_tree:main"
dsakit-bst = "dsakit.bst:main"
dsakit-expression-tree = "dsakit.expression_tree:main"
dsakit-graph-traversal = "dsakit.graph_traversal:main"
dsakit-prim = "dsakit.prim:main"
dsakit-optimal-bst = "dsakit.optimal_bst:main"
dsakit-avl-dictionary = "dsakit.avl_dictionary:main"

[tool.hatch.build.targets.wheel]
packages = ["dsakit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
