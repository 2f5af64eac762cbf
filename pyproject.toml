[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cmark-writer"
version = "0.1.0"
description = "Serialize an in-memory document tree to CommonMark text."
requires-python = ">=3.10"
dependencies = []
keywords = ["commonmark", "markdown", "writer", "serializer", "ast"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cmark_writer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
