[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bookmark-observer"
version = "0.1.0"
description = "Bookmark tree with observer-style event delivery, a selection manager and a headless item model"
requires-python = ">=3.10"
dependencies = []
keywords = ["bookmarks", "observer", "events", "tree", "item-model"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bookmark_observer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
