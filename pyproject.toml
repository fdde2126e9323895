[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dotstate"
version = "0.1.0"
description = "Archive-backed systems, git status parsing, command logging and helper tools for managing dotfiles"
requires-python = ">=3.10"
dependencies = []
keywords = ["dotfiles", "configuration", "tar", "zip", "git", "lint"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dotstate-lint-whitespace = "dotstate.lintwhitespace:main"
dotstate-content-docs = "dotstate.contentdocs:main"

[tool.hatch.build.targets.wheel]
packages = ["dotstate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
