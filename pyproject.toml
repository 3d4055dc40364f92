[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordhuff"
version = "0.1.0"
description = "Tokenize text into words, count them, and build a word-level Huffman code"
requires-python = ">=3.10"
dependencies = []
keywords = ["huffman", "tokenizer", "word frequency", "binary search tree", "compression"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordhuff = "wordhuff.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordhuff"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
