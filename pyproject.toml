[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyinterp"
version = "0.1.0"
description = "A tiny tokenizer and parser for a minimal assignment-and-print language"
requires-python = ">=3.10"
dependencies = []
keywords = ["tokenizer", "parser", "syntax-tree", "toy-language"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinyinterp = "tinyinterp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyinterp"]

[tool.pytest.ini_options]
addopts = "-ra"
