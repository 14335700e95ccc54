[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boxkeeper"
version = "0.1.0"
description = "Interactive console inventory for keeping track of up to ten boxes"
requires-python = ">=3.10"
keywords = ["inventory", "boxes", "console", "menu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
boxkeeper = "boxkeeper.basic_menu:main"
boxkeeper-validated = "boxkeeper.validated_menu:main"
boxkeeper-ids = "boxkeeper.id_menu:main"

[tool.hatch.build.targets.wheel]
packages = ["boxkeeper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
