"""Parser for the ``close`` command."""

from __future__ import annotations

from dataclasses import dataclass

from ..token import Token, Tokenizer


@dataclass(frozen=True)
class CloseCommand:
    """Close the issue or pull request."""


def parse(tokenizer: Tokenizer) -> CloseCommand | None:
    """Recognise ``close`` without consuming any input."""
    if tokenizer.peek_token() == Token.word("close"):
        return CloseCommand()
    return None