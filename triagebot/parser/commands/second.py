"""Parser for the ``second`` command of the major-change process."""

from __future__ import annotations

from dataclasses import dataclass

from ..token import Token, Tokenizer

_WORDS = (Token.word("second"), Token.word("seconded"))


@dataclass(frozen=True)
class SecondCommand:
    """Second a major-change proposal."""


def parse(tokenizer: Tokenizer) -> SecondCommand | None:
    """Recognise ``second`` or ``seconded`` without consuming any input."""
    if tokenizer.peek_token() in _WORDS:
        return SecondCommand()
    return None