"""Finds and parses bot commands in comment text."""

from __future__ import annotations

import enum
import logging
import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from .commands import (
    assign,
    close,
    glacier,
    nominate,
    note,
    ping,
    prioritize,
    relabel,
    second,
    shortcut,
)
from .error import CommandError
from .ignore_block import IgnoreBlocks
from .token import Tokenizer

log = logging.getLogger(__name__)


class CommandKind(enum.Enum):
    RELABEL = "relabel"
    ASSIGN = "assign"
    PING = "ping"
    NOMINATE = "nominate"
    PRIORITIZE = "prioritize"
    SECOND = "second"
    GLACIER = "glacier"
    SHORTCUT = "shortcut"
    CLOSE = "close"
    NOTE = "note"


_PARSERS: tuple[tuple[CommandKind, Callable[[Tokenizer], object]], ...] = (
    (CommandKind.RELABEL, relabel.parse),
    (CommandKind.ASSIGN, assign.parse),
    (CommandKind.NOTE, note.parse),
    (CommandKind.PING, ping.parse),
    (CommandKind.NOMINATE, nominate.parse),
    (CommandKind.PRIORITIZE, prioritize.parse),
    (CommandKind.SECOND, second.parse),
    (CommandKind.GLACIER, glacier.parse),
    (CommandKind.SHORTCUT, shortcut.parse),
    (CommandKind.CLOSE, close.parse),
)


@dataclass(frozen=True)
class Command:
    """A recognised command: its parsed ``value`` or the ``error`` it raised."""

    kind: CommandKind
    value: object = None
    error: CommandError | None = None

    def is_ok(self) -> bool:
        return self.error is None

    def is_err(self) -> bool:
        return not self.is_ok()


def _run_parser(
    kind: CommandKind, parser: Callable[[Tokenizer], object], tokenizer: Tokenizer
) -> tuple[Tokenizer, Command] | None:
    tok = tokenizer.copy()
    try:
        value = parser(tok)
    except CommandError as exc:
        log.info("parsed %s command: %r", kind.value, exc)
        return tok, Command(kind, error=exc)
    log.info("parsed %s command: %r", kind.value, value)
    if value is None:
        return None
    return tok, Command(kind, value=value)


class Input:
    """Iterates over the commands addressed to ``bots`` within ``text``.

    Commands inside code or block quotes are skipped. ``r?`` requests a
    reviewer whatever bot is configured.
    """

    def __init__(self, text: str, bots: Iterable[str]) -> None:
        self.text = text
        self._parsed = 0
        self._ignore = IgnoreBlocks(text)
        alternatives = [r"(?P<review>\br\?)"]
        alternatives.extend(rf"(?:@{re.escape(bot)}\b)" for bot in bots)
        self._bot_re = re.compile("|".join(alternatives), re.IGNORECASE)

    def __iter__(self) -> Iterator[Command]:
        return self

    def __next__(self) -> Command:
        while True:
            match = self._bot_re.search(self.text[self._parsed :])
            if match is None:
                raise StopIteration
            start = self._parsed + match.start()
            end = self._parsed + match.end()
            self._parsed = end
            if self._ignore.overlaps_ignore(start, end) is not None:
                log.info("command overlaps ignored block; ignore: %r", self._ignore)
                continue
            if match.group("review") is not None:
                command = self._parse_review()
            else:
                command = self._parse_command()
            if command is not None:
                return command

    def remaining(self) -> str:
        """The text not yet consumed."""
        return self.text[self._parsed :]

    def consumed(self) -> str:
        """The text consumed so far."""
        return self.text[: self._parsed]

    def _parse_command(self) -> Command | None:
        tokenizer = Tokenizer(self.text[self._parsed :])
        found = [
            outcome
            for kind, parser in _PARSERS
            if (outcome := _run_parser(kind, parser, tokenizer)) is not None
        ]
        if len(found) > 1:
            raise RuntimeError(
                f"succeeded parsing {self.remaining()!r} to multiple commands: "
                f"{[command for _, command in found]!r}"
            )
        if not found:
            return None
        tok, command = found[0]
        # A failed command leaves the input where it was.
        if command.is_ok():
            self._parsed += tok.position()
        return command

    def _parse_review(self) -> Command:
        tok = Tokenizer(self.text[self._parsed :])
        try:
            command = Command(CommandKind.ASSIGN, value=assign.parse_review(tok))
        except CommandError as exc:
            command = Command(CommandKind.ASSIGN, error=exc)
        self._parsed += tok.position()
        return command


def parse_commands(text: str, bots: Iterable[str]) -> list[Command]:
    """Return every command addressed to ``bots`` in ``text``."""
    return list(Input(text, bots))