"""Archive-backed systems, git status parsing, command logging and helper tools for dotfiles."""

__version__ = "0.1.0"