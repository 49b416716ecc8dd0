[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cmarklib"
version = "0.1.0"
description = "Building blocks for a CommonMark processor: source pointers, tokens, transactions, collections and HTML rendering"
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "commonmark", "html", "tokenizer", "parser"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Text Processing :: Markup :: HTML",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cmarklib = "cmarklib.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cmarklib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
