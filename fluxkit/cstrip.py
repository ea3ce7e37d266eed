"""Removal of C-style comments from source text."""

from __future__ import annotations

import re

_COMMENT_START = re.compile(r"/[/*]")


def strip_comments(source: str) -> str:
    """Remove ``//`` line comments and ``/* */`` block comments.

    A line comment ends before its newline, which is kept. An unclosed
    block comment swallows the rest of the text.
    """
    pieces = []
    pos = 0
    while True:
        match = _COMMENT_START.search(source, pos)
        if match is None:
            pieces.append(source[pos:])
            break
        pieces.append(source[pos:match.start()])
        if match.group() == "//":
            end = source.find("\n", match.end())
            if end == -1:
                break
            pos = end
        else:
            end = source.find("*/", match.end())
            if end == -1:
                break
            pos = end + 2
    return "".join(pieces)