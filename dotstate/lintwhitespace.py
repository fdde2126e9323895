"""Check text files for CRLF line endings, trailing whitespace and missing final newlines."""

from __future__ import annotations

import argparse
import os
import re
from collections.abc import Iterator, Sequence

__all__ = ["IGNORE_PATTERNS", "lint_file", "lint_tree", "main"]

IGNORE_PATTERNS = [
    re.compile(p)
    for p in (
        r"\.svg\Z",
        r"\A\.devcontainer/library-scripts\Z",
        r"\A\.git\Z",
        r"\A\.vscode/settings\.json\Z",
        r"\Aassets/scripts/install\.ps1\Z",
        r"\Acompletions/chezmoi\.ps1\Z",
        r"\Achezmoi\.io/public\Z",
        r"\Achezmoi\.io/resources\Z",
        r"\Achezmoi\.io/themes/book\Z",
    )
]

_CRLF_RE = re.compile(rb"\r\Z")
_TRAILING_WHITESPACE_RE = re.compile(rb"[\t\n\f\r ]+\Z")

_SNIFF_LEN = 512
_TEXT_BOMS = (b"\xfe\xff", b"\xff\xfe", b"\xef\xbb\xbf")
_BINARY_SIGNATURES = (
    b"%PDF-",
    b"%!PS-Adobe-",
    b"\x00\x00\x01\x00",
    b"\x00\x00\x02\x00",
    b"BM",
    b"GIF87a",
    b"GIF89a",
    b"\x89PNG\r\n\x1a\n",
    b"\xff\xd8\xff",
    b"OggS\x00",
    b"ID3",
    b"\x1aE\xdf\xa3",
    b"wOFF",
    b"wOF2",
    b"\x1f\x8b\x08",
    b"PK\x03\x04",
    b"Rar!\x1a\x07",
    b"\x00asm",
)
_BINARY_BYTES = frozenset([*range(0x00, 0x09), 0x0B, *range(0x0E, 0x1B), *range(0x1C, 0x20)])


def _is_text(data: bytes) -> bool:
    head = data[:_SNIFF_LEN]
    if head.startswith(_TEXT_BOMS):
        return True
    if head.startswith(_BINARY_SIGNATURES):
        return False
    return not any(byte in _BINARY_BYTES for byte in head)


def _lint(path: str | os.PathLike[str], name: str) -> list[str]:
    with open(path, "rb") as f:
        data = f.read()
    if not _is_text(data):
        return []
    problems = []
    lines = data.split(b"\n")
    for number, line in enumerate(lines, start=1):
        if _CRLF_RE.search(line):
            problems.append(f"{name}:{number}: CRLF line ending")
        elif _TRAILING_WHITESPACE_RE.search(line):
            problems.append(f"{name}:{number}: trailing whitespace")
    if data and lines[-1]:
        problems.append(f"{name}: no newline at end of file")
    return problems


def lint_file(filename: str | os.PathLike[str]) -> list[str]:
    """Return the whitespace problems in filename; binary files have none."""
    return _lint(filename, os.fspath(filename))


def _ignored(rel: str) -> bool:
    return any(pattern.search(rel) for pattern in IGNORE_PATTERNS)


def _regular_files(root: str, prefix: str = "") -> Iterator[str]:
    """Yield the slash-separated paths of regular files under root, skipping ignored ones."""
    with os.scandir(os.path.join(root, prefix) if prefix else root) as entries:
        for entry in entries:
            rel = prefix + entry.name
            if _ignored(rel):
                continue
            if entry.is_dir(follow_symlinks=False):
                yield from _regular_files(root, rel + "/")
            elif entry.is_file(follow_symlinks=False):
                yield rel


def lint_tree(root: str | os.PathLike[str] = ".") -> list[str]:
    """Lint every regular file under root, reporting paths relative to root."""
    root = os.fspath(root)
    problems = []
    for name in sorted(_regular_files(root)):
        problems.extend(_lint(os.path.join(root, name), name))
    return problems


def main(argv: Sequence[str] | None = None) -> int:
    """Lint a tree and print each problem; return 1 if any were found."""
    parser = argparse.ArgumentParser(description="Check files for whitespace problems.")
    parser.add_argument("root", nargs="?", default=".", help="directory to check")
    args = parser.parse_args(argv)
    try:
        problems = lint_tree(args.root)
    except OSError as exc:
        print(exc)
        return 1
    for problem in problems:
        print(problem)
    return 1 if problems else 0