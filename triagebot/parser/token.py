"""Tokenizer for bot commands written in comment text."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .error import CommandError


class TokenKind(enum.Enum):
    DOT = "."
    COMMA = ","
    SEMI = ";"
    EXCLAMATION = "!"
    QUESTION = "?"
    COLON = ":"
    END_OF_LINE = "\n"
    PAREN_LEFT = "("
    PAREN_RIGHT = ")"
    QUOTE = "quote"
    WORD = "word"


_PUNCTUATION = {
    kind.value: kind
    for kind in TokenKind
    if kind not in (TokenKind.QUOTE, TokenKind.WORD)
}


@dataclass(frozen=True)
class Token:
    """A single token; ``text`` is set for words and quoted strings."""

    kind: TokenKind
    text: str = ""

    @classmethod
    def word(cls, text: str) -> Token:
        return cls(TokenKind.WORD, text)

    @classmethod
    def quote(cls, text: str) -> Token:
        return cls(TokenKind.QUOTE, text)

    def __str__(self) -> str:
        if self.kind is TokenKind.QUOTE:
            return f'"{self.text}"'
        if self.kind is TokenKind.WORD:
            return self.text
        if self.kind is TokenKind.END_OF_LINE:
            return ""
        return self.kind.value


class TokenErrorKind(enum.Enum):
    UNTERMINATED_STRING = "unterminated string"
    QUOTE_IN_WORD = "quote in word"
    RAW_STRING = "raw strings are not yet supported"

    def __str__(self) -> str:
        return self.value


class Tokenizer:
    """Splits text into tokens, emitting a final end-of-line once at the end."""

    def __init__(self, text: str) -> None:
        self.text = text
        self._pos = 0
        self._end_emitted = False

    def copy(self) -> Tokenizer:
        clone = Tokenizer(self.text)
        clone._pos = self._pos
        clone._end_emitted = self._end_emitted
        return clone

    def error(self, source: object) -> CommandError:
        return CommandError(self.text, self._pos, source)

    def position(self) -> int:
        return self._pos

    def peek_token(self) -> Token | None:
        return self.copy().next_token()

    def next_token(self) -> Token | None:
        text = self.text
        while self._pos < len(text) and text[self._pos] != "\n" and text[self._pos].isspace():
            self._pos += 1
        if self._pos >= len(text):
            if self._end_emitted:
                return None
            self._end_emitted = True
            return Token(TokenKind.END_OF_LINE)
        ch = text[self._pos]
        kind = _PUNCTUATION.get(ch)
        if kind is not None:
            self._pos += 1
            return Token(kind)
        if ch == '"':
            return self._consume_string()
        return self._consume_word()

    def eat_token(self, token: Token) -> bool:
        if self.peek_token() == token:
            self.next_token()
            return True
        return False

    def _consume_string(self) -> Token:
        self._pos += 1
        close = self.text.find('"', self._pos)
        if close < 0:
            self._pos = len(self.text)
            raise self.error(TokenErrorKind.UNTERMINATED_STRING)
        body = self.text[self._pos : close]
        self._pos = close + 1
        return Token.quote(body)

    def _consume_word(self) -> Token:
        text = self.text
        start = self._pos
        while self._pos < len(text):
            ch = text[self._pos]
            if ch in _PUNCTUATION or ch.isspace():
                break
            if ch == '"':
                so_far = text[start : self._pos]
                if so_far.startswith("r") and all(c in '#"' for c in so_far[1:]):
                    raise self.error(TokenErrorKind.RAW_STRING)
                raise self.error(TokenErrorKind.QUOTE_IN_WORD)
            self._pos += 1
        return Token.word(text[start : self._pos])


def tokenize(text: str) -> list[Token]:
    """Return every token of ``text``; raises CommandError on bad input."""
    tokenizer = Tokenizer(text)
    tokens = []
    while (token := tokenizer.next_token()) is not None:
        tokens.append(token)
    return tokens