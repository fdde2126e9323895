"""Turn a documentation page into a website content page with front matter."""

from __future__ import annotations

import argparse
import json
import logging
import posixpath
import re
import sys
from collections.abc import Iterable, Iterator, Sequence

__all__ = ["rewrite_links", "convert", "main"]

logger = logging.getLogger(__name__)

_DOCS_URL_RE = re.compile(r"https://github\.com/[^/\s]+/[^/\s]+/blob/master/docs/[A-Z]+\.md")
_PAGE_RENAMES = {
    "HOWTO": "how-to",
    "QUICKSTART": "quick-start",
}
_TOC_MARKER = "<!--- toc --->"


def _site_link(match: re.Match[str]) -> str:
    name = posixpath.splitext(posixpath.basename(match.group(0)))[0]
    return "/docs/" + _PAGE_RENAMES.get(name, name.lower()) + "/"


def rewrite_links(text: str) -> str:
    """Replace links to documentation files with links to site pages."""
    return _DOCS_URL_RE.sub(_site_link, text)


def convert(lines: Iterable[str], short_title: str, long_title: str) -> Iterator[str]:
    """Yield the converted page, one newline-terminated chunk at a time.

    The first input line is replaced by the long title, everything up to and
    including the table of contents and the blank line after it is dropped, and
    the rest is copied with its links rewritten.
    """
    yield f"---\ntitle: {json.dumps(short_title, ensure_ascii=False)}\n---\n\n"
    state = "replace-title"
    for raw in lines:
        text = raw.removesuffix("\n").removesuffix("\r")
        logger.debug("%s: %r", state, text)
        if state == "replace-title":
            yield f"# {long_title}\n\n"
            state = "find-toc"
        elif state == "find-toc":
            if text == _TOC_MARKER:
                state = "skip-toc"
        elif state == "skip-toc":
            if text == "":
                state = "copy-content"
        else:
            yield rewrite_links(text) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Convert standard input to standard output."""
    parser = argparse.ArgumentParser(description="Convert a documentation page to site content.")
    parser.add_argument("-debug", "--debug", action="store_true", help="debug")
    parser.add_argument("-shorttitle", "--shorttitle", default="", help="short title")
    parser.add_argument("-longtitle", "--longtitle", default="", help="long title")
    args = parser.parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    try:
        for chunk in convert(sys.stdin, args.shorttitle, args.longtitle):
            sys.stdout.write(chunk)
    except (OSError, UnicodeDecodeError) as exc:
        print(exc)
        return 1
    return 0