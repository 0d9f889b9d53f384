"""Parser for the glacier command, which tracks internal compiler errors.

Grammar::

    Command: `@bot glacier <code-source>`

where ``<code-source>`` is a quoted gist URL.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..token import TokenKind, Tokenizer, Token

_GIST_PREFIX = "https://gist.github.com/"


class GlacierParseError(enum.Enum):
    NO_LINK = "no link provided - did you forget the quotes around it?"
    INVALID_LINK = "invalid link - must be from a playground gist"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class GlacierCommand:
    source: str


def parse(tokenizer: Tokenizer) -> GlacierCommand | None:
    """Parse ``glacier "<url>"``; None if the input is not a glacier command."""
    toks = tokenizer.copy()
    if toks.peek_token() != Token.word("glacier"):
        return None
    toks.next_token()
    token = toks.next_token()
    if token is not None and token.kind is TokenKind.QUOTE:
        if token.text.startswith(_GIST_PREFIX):
            return GlacierCommand(token.text)
        raise toks.error(GlacierParseError.INVALID_LINK)
    if token is not None and token.kind is TokenKind.WORD:
        raise toks.error(GlacierParseError.INVALID_LINK)
    raise toks.error(GlacierParseError.NO_LINK)