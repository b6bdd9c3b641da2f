[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pluslex"
version = "0.1.0"
description = "Lexical analyser for the Plus++ teaching language"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "tokenizer", "compiler", "plus"]
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
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
la = "pluslex.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pluslex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
