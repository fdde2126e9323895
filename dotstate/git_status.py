"""Parsing of ``git status --ignored --porcelain=v2`` output."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

__all__ = [
    "ParseError",
    "OrdinaryStatus",
    "RenamedOrCopiedStatus",
    "UnmergedStatus",
    "UntrackedStatus",
    "IgnoredStatus",
    "Status",
    "parse_status_porcelain_v2",
]

_XY = r"([!.?ACDMRU])([!.?ACDMRU]) "
_SUB = r"(N\.\.\.|S[.C][.M][.U]) "
_MODE = r"([0-7]+) "
_HASH = r"([0-9a-f]+) "

_ORDINARY_RE = re.compile("1 " + _XY + _SUB + _MODE * 3 + _HASH * 2 + r"(.*)")
_RENAMED_OR_COPIED_RE = re.compile(
    "2 " + _XY + _SUB + _MODE * 3 + _HASH * 2 + r"([CR])([0-9]+) (.*?)\t(.*)"
)
_UNMERGED_RE = re.compile("u " + _XY + _SUB + _MODE * 4 + _HASH * 3 + r"(.*)")
_UNTRACKED_RE = re.compile(r"\? (.*)")
_IGNORED_RE = re.compile(r"! (.*)")


class ParseError(Exception):
    """A line of status output could not be parsed."""

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

    def __str__(self) -> str:
        return f"{self.text}: parse error"


@dataclass
class OrdinaryStatus:
    """Status of a modified file."""

    x: str
    y: str
    sub: str
    mh: int
    mi: int
    mw: int
    hh: str
    hi: str
    path: str


@dataclass
class RenamedOrCopiedStatus:
    """Status of a renamed or copied file."""

    x: str
    y: str
    sub: str
    mh: int
    mi: int
    mw: int
    hh: str
    hi: str
    rc: str
    score: int
    path: str
    orig_path: str


@dataclass
class UnmergedStatus:
    """Status of an unmerged file."""

    x: str
    y: str
    sub: str
    m1: int
    m2: int
    m3: int
    mw: int
    h1: str
    h2: str
    h3: str
    path: str


@dataclass
class UntrackedStatus:
    """Status of an untracked file."""

    path: str


@dataclass
class IgnoredStatus:
    """Status of an ignored file."""

    path: str


@dataclass
class Status:
    """The parsed status of a working tree."""

    ordinary: list[OrdinaryStatus] = field(default_factory=list)
    renamed_or_copied: list[RenamedOrCopiedStatus] = field(default_factory=list)
    unmerged: list[UnmergedStatus] = field(default_factory=list)
    untracked: list[UntrackedStatus] = field(default_factory=list)
    ignored: list[IgnoredStatus] = field(default_factory=list)

    def empty(self) -> bool:
        """Return True if no entries are recorded."""
        return not (
            self.ignored
            or self.ordinary
            or self.renamed_or_copied
            or self.unmerged
            or self.untracked
        )


def _lines(text: str) -> Iterator[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line.removesuffix("\r")


def _match(pattern: re.Pattern[str], line: str) -> re.Match[str]:
    match = pattern.fullmatch(line)
    if match is None:
        raise ParseError(line)
    return match


def parse_status_porcelain_v2(output: bytes | str) -> Status | None:
    """Parse porcelain v2 status output; return None if there is nothing."""
    if isinstance(output, bytes):
        output = output.decode("utf-8", errors="surrogateescape")
    status = Status()
    for line in _lines(output):
        kind = line[:1]
        if kind == "1":
            g = _match(_ORDINARY_RE, line).groups()
            status.ordinary.append(
                OrdinaryStatus(
                    x=g[0],
                    y=g[1],
                    sub=g[2],
                    mh=int(g[3], 8),
                    mi=int(g[4], 8),
                    mw=int(g[5], 8),
                    hh=g[6],
                    hi=g[7],
                    path=g[8],
                )
            )
        elif kind == "2":
            g = _match(_RENAMED_OR_COPIED_RE, line).groups()
            status.renamed_or_copied.append(
                RenamedOrCopiedStatus(
                    x=g[0],
                    y=g[1],
                    sub=g[2],
                    mh=int(g[3], 8),
                    mi=int(g[4], 8),
                    mw=int(g[5], 8),
                    hh=g[6],
                    hi=g[7],
                    rc=g[8],
                    score=int(g[9], 10),
                    path=g[10],
                    orig_path=g[11],
                )
            )
        elif kind == "u":
            g = _match(_UNMERGED_RE, line).groups()
            status.unmerged.append(
                UnmergedStatus(
                    x=g[0],
                    y=g[1],
                    sub=g[2],
                    m1=int(g[3], 8),
                    m2=int(g[4], 8),
                    m3=int(g[5], 8),
                    mw=int(g[6], 8),
                    h1=g[7],
                    h2=g[8],
                    h3=g[9],
                    path=g[10],
                )
            )
        elif kind == "?":
            status.untracked.append(UntrackedStatus(path=_match(_UNTRACKED_RE, line).group(1)))
        elif kind == "!":
            status.ignored.append(IgnoredStatus(path=_match(_IGNORED_RE, line).group(1)))
        elif kind == "#":
            continue
        else:
            raise ParseError(line)
    if status.empty():
        return None
    return status