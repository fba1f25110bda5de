[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grepx"
version = "0.1.0"
description = "A multi-threaded regex search tool for files and directory trees"
requires-python = ">=3.10"
dependencies = [
    "tqdm",
]
keywords = ["grep", "regex", "search", "text", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
grepx = "grepx.main:main"

[tool.hatch.build.targets.wheel]
packages = ["grepx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
