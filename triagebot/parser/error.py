"""The error raised when a command cannot be parsed."""

from __future__ import annotations

_CONTEXT = 10


class CommandError(Exception):
    """A parse failure at a position within a command's input text.

    Two errors compare equal when they refer to the same input and position,
    whatever their underlying cause.
    """

    def __init__(self, text: str, position: int, source: object) -> None:
        super().__init__(text, position, source)
        self.text = text
        self.position = position
        self.source = source
        if isinstance(source, BaseException):
            self.__cause__ = source

    def __str__(self) -> str:
        before = self.text[max(0, self.position - _CONTEXT) : self.position]
        after = self.text[self.position : min(len(self.text), self.position + _CONTEXT)]
        return f"...'{before}' | error: {self.source} at >| '{after}'..."

    def __repr__(self) -> str:
        return (
            f"CommandError(text={self.text!r}, position={self.position!r}, "
            f"source={self.source!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommandError):
            return NotImplemented
        return (self.text, self.position) == (other.text, other.position)

    def __hash__(self) -> int:
        return hash((self.text, self.position))