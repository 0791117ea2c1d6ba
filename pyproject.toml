[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "versionview"
version = "0.1.0"
description = "Toolkit-independent key bindings, searchable tables and dialog logic for a terminal version browser"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "key-bindings",
    "table",
    "search",
    "dialog",
    "view-model",
    "terminal",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["versionview"]

[tool.hatch.build.targets.sdist]
include = ["versionview", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
