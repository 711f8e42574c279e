[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minishparse"
version = "0.1.0"
description = "Front end for a small POSIX-like shell: lexing, syntax checking, variable and wildcard expansion"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "lexer", "tokenizer", "syntax", "glob", "wildcard", "expansion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minishparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
