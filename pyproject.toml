[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ctredit"
version = "0.1.0"
description = "A small console text editor with an on-screen keyboard, a character-cell screen buffer and a tiny expression language"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "text-buffer", "virtual-keyboard", "lexer", "parser", "repl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ctredit = "ctredit.app:main"
ctredit-repl = "ctredit.repl:main"

[tool.hatch.build.targets.wheel]
packages = ["ctredit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
