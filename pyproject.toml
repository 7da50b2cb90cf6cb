[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lynix"
version = "0.1.0"
description = "Tokenizer for the Lynix language, with a small JSON-like document tree, serializer and streaming parser"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "tokenizer", "json", "streaming-parser", "compiler"]
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
    "Topic :: Software Development :: Compilers",
    "Topic :: File Formats :: JSON",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lynix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
