"""Parser for the ``ping`` command.

Grammar::

    Command: `@bot ping <team>`.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..token import Token, TokenKind, Tokenizer


class PingParseError(enum.Enum):
    EXPECTED_END = "expected end of command"
    NO_TEAM = "no team specified"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PingCommand:
    team: str


def parse(tokenizer: Tokenizer) -> PingCommand | None:
    """Parse ``ping <team>``; None if the input is not a ping."""
    toks = tokenizer.copy()
    if toks.peek_token() != Token.word("ping"):
        return None
    toks.next_token()
    token = toks.next_token()
    if token is None or token.kind is not TokenKind.WORD:
        raise toks.error(PingParseError.NO_TEAM)
    end = toks.peek_token()
    if end is not None and end.kind in (TokenKind.DOT, TokenKind.END_OF_LINE):
        toks.next_token()
        vars(tokenizer).update(vars(toks))
        return PingCommand(token.text)
    raise toks.error(PingParseError.EXPECTED_END)