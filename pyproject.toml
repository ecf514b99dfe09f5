[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "redblack"
version = "0.1.0"
description = "A red-black tree of integers with insertion, removal and a pre-order listing, plus a small command loop."
requires-python = ">=3.10"
dependencies = []
keywords = ["red-black tree", "balanced tree", "binary search tree", "data structures"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
redblack = "redblack.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["redblack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
