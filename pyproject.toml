[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fluxkit"
version = "0.1.0"
description = "Register file for a bytecode VM, a FLUX.MD document parser and a small arithmetic expression front end"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "virtual-machine",
    "registers",
    "markdown",
    "parser",
    "expression",
]
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
    "Topic :: Software Development :: Interpreters",
    "Topic :: Text Processing :: Markup :: Markdown",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fluxkit"]

[tool.pytest.ini_options]
addopts = "-ra"
