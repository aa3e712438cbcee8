[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exprlex"
version = "0.1.0"
description = "A small lexer for arithmetic expressions with numbers, identifiers, operators and brackets"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "tokenizer", "expression", "arithmetic", "state machine"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Compilers",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
exprlex = "exprlex.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["exprlex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
