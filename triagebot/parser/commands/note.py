"""Parser for the ``note`` command, which adds or removes summary notes."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..token import Token, TokenKind, Tokenizer


class NoteParseError(enum.Enum):
    MISSING_TITLE = "missing required summary title"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NoteCommand:
    """A summary note with ``title``; ``remove`` asks for it to be deleted."""

    title: str
    remove: bool = False


def parse(tokenizer: Tokenizer) -> NoteCommand | None:
    """Parse ``note [remove] <title>``; None if the input is not a note."""
    toks = tokenizer.copy()
    if toks.peek_token() != Token.word("note"):
        return None
    toks.next_token()
    remove = False
    while True:
        token = toks.next_token()
        if token == Token.word("remove"):
            remove = True
            continue
        if token is not None and token.kind in (TokenKind.WORD, TokenKind.QUOTE):
            return NoteCommand(token.text, remove)
        raise toks.error(NoteParseError.MISSING_TITLE)