"""Parser for the ``prioritize`` command."""

from __future__ import annotations

from dataclasses import dataclass

from ..token import Token, Tokenizer


@dataclass(frozen=True)
class PrioritizeCommand:
    """Request prioritization of the issue."""


def parse(tokenizer: Tokenizer) -> PrioritizeCommand | None:
    """Recognise ``prioritize`` without consuming any input."""
    if tokenizer.peek_token() == Token.word("prioritize"):
        return PrioritizeCommand()
    return None