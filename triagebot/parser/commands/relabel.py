"""Parser for the label modification command.

Grammar::

    Command: `@bot modify? <label-w> to? :? <label-list>.`

    <label-w>: label | labels

    <label-list>:
     - <label-delta>
     - <label-delta> and <label-list>
     - <label-delta>, <label-list>
     - <label-delta>, and <label-list>

    <label-delta>: +<label> | -<label> | <label>

A label that itself starts with ``+`` or ``-`` can only be added with an
explicit prefix (``++label``, ``-+label``).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..token import Token, TokenKind, Tokenizer

_ENDINGS = (TokenKind.SEMI, TokenKind.DOT, TokenKind.END_OF_LINE)


class RelabelParseError(enum.Enum):
    EMPTY_LABEL = "empty label"
    EXPECTED_LABEL_DELTA = "a label delta"
    MISLEADING_TO = "forbidden `to`, use `+to`"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LabelDelta:
    """A label to add (``add`` true) or remove."""

    label: str
    add: bool = True


@dataclass(frozen=True)
class RelabelCommand:
    deltas: tuple[LabelDelta, ...]


def parse_label_delta(tokenizer: Tokenizer) -> LabelDelta:
    """Consume one ``+label``, ``-label`` or ``label`` word."""
    token = tokenizer.peek_token()
    if token is None or token.kind is not TokenKind.WORD:
        raise tokenizer.error(RelabelParseError.EXPECTED_LABEL_DELTA)
    tokenizer.next_token()
    word = token.text
    if word.startswith("+"):
        name, add = word[1:], True
    elif word.startswith("-"):
        name, add = word[1:], False
    else:
        name, add = word, True
    if not name:
        raise tokenizer.error(RelabelParseError.EMPTY_LABEL)
    return LabelDelta(name, add)


def parse(tokenizer: Tokenizer) -> RelabelCommand | None:
    """Parse a label command; None if the input is not one."""
    toks = tokenizer.copy()
    toks.eat_token(Token.word("modify"))
    if not (toks.eat_token(Token.word("labels")) or toks.eat_token(Token.word("label"))):
        return None
    toks.eat_token(Token.word("to"))
    toks.eat_token(Token(TokenKind.COLON))

    if toks.peek_token() == Token.word("to"):
        raise toks.error(RelabelParseError.MISLEADING_TO)

    deltas = []
    while True:
        deltas.append(parse_label_delta(toks))
        toks.eat_token(Token(TokenKind.COMMA))
        toks.eat_token(Token.word("and"))
        end = toks.peek_token()
        if end is not None and end.kind in _ENDINGS:
            toks.next_token()
            vars(tokenizer).update(vars(toks))
            return RelabelCommand(tuple(deltas))