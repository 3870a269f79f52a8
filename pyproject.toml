[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "jshell"
version = "0.1.0"
description = "A small interactive command shell with builtins, heredocs and string utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "builtins", "heredoc", "command-line", "environment"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jshell = "jshell.shell:main"
jshell-cd = "jshell.cdshell:main"
jshell-signals = "jshell.signals:main"
jshell-check-file = "jshell.diagnostics:main"

[tool.setuptools.packages.find]
include = ["jshell*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
