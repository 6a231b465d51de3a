[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minigit"
version = "0.1.0"
description = "A tiny content-addressed version control tool that keeps snapshots in a .miniGit directory"
requires-python = ">=3.10"
dependencies = []
keywords = ["version-control", "vcs", "snapshots", "sha1", "content-addressed"]
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
    "Topic :: Software Development :: Version Control",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minigit = "minigit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minigit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
