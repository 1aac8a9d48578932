[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ansikit"
version = "1.0.0"
description = "ANSI terminal styling toolkit: LS_COLORS parsing, lossy color conversion, escape-sequence state machine and terminal capability queries"
requires-python = ">=3.10"
dependencies = []
keywords = ["ansi", "terminal", "color", "ls_colors", "escape-codes", "vt"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ansikit-query = "ansikit.query:main"

[tool.hatch.build.targets.wheel]
packages = ["ansikit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
