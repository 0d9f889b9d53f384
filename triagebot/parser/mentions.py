"""Extraction of @-mentions of users and teams from comment text."""

from __future__ import annotations

import string

from .ignore_block import IgnoreBlocks

_USERNAME_CHARS = frozenset(string.ascii_letters + string.digits + "-_")
_ASCII_LETTERS = frozenset(string.ascii_letters)


def _username_end(text: str, begin: int) -> int:
    saw_slash = False
    for pos in range(begin, len(text)):
        ch = text[pos]
        if ch in _USERNAME_CHARS:
            continue
        if ch == "/" and not saw_slash:
            saw_slash = True
            continue
        return pos
    return len(text)


def get_mentions(text: str) -> list[str]:
    """Return the users or teams mentioned in ``text``, without the ``@``.

    Mentions inside code or block quotes are skipped, as are ones glued to a
    preceding ASCII letter (such as e-mail addresses).
    """
    ignore_regions = IgnoreBlocks(text)
    mentions = []
    idx = text.find("@")
    while idx >= 0:
        next_idx = text.find("@", idx + 1)
        if idx == 0 or text[idx - 1] not in _ASCII_LETTERS:
            username = text[idx + 1 : _username_end(text, idx + 1)]
            if username and ignore_regions.overlaps_ignore(idx, idx + len(username)) is None:
                mentions.append(username)
        idx = next_idx
    return mentions