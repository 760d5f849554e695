[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blindpoker"
version = "0.1.0"
description = "A terminal card game: build poker hands to beat a rising blind."
requires-python = ">=3.10"
dependencies = []
keywords = ["card game", "poker", "terminal", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
blindpoker = "blindpoker.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["blindpoker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
