[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "breezelang"
version = "0.1.0"
description = "Lexer and syntax tree node types for the Breeze programming language"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "tokenizer", "syntax tree", "compiler", "language"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
breezelang = "breezelang.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["breezelang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
