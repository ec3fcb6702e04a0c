[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leafedit"
version = "0.8.18"
description = "The editing core of a simple text editor: buffer, undo, search, line numbers, menus and settings"
requires-python = ">=3.10"
dependencies = []
keywords = ["text editor", "undo", "redo", "search", "replace", "line numbers"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
leafedit = "leafedit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["leafedit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
