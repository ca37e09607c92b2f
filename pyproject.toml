[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "letex"
version = "0.1.0"
description = "A small text editor that wraps text to the window and draws a blinking caret"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["editor", "text", "word-wrap", "caret", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
letex = "letex.app:main"

[tool.hatch.build.targets.wheel]
packages = ["letex"]

[tool.pytest.ini_options]
addopts = "-ra"
