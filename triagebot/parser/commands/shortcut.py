"""Parser for single-word shortcut commands.

Grammar::

    Command: `@bot ready`/`@bot review`, `@bot author` or `@bot blocked`.
"""

from __future__ import annotations

import enum

from ..token import TokenKind, Tokenizer


class ShortcutCommand(enum.Enum):
    READY = "ready"
    AUTHOR = "author"
    BLOCKED = "blocked"


_SHORTCUTS = {
    "ready": ShortcutCommand.READY,
    "review": ShortcutCommand.READY,
    "reviewer": ShortcutCommand.READY,
    "author": ShortcutCommand.AUTHOR,
    "blocked": ShortcutCommand.BLOCKED,
}


def parse(tokenizer: Tokenizer) -> ShortcutCommand | None:
    """Parse a shortcut word; None if the input is not one."""
    toks = tokenizer.copy()
    token = toks.peek_token()
    if token is None or token.kind is not TokenKind.WORD or token.text not in _SHORTCUTS:
        return None
    toks.next_token()
    vars(tokenizer).update(vars(toks))
    return _SHORTCUTS[token.text]