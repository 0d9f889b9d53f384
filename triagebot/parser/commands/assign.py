"""Parser for the assignment commands.

Grammar::

    Command: `@bot claim`, `@bot release-assignment`, or `@bot assign @user`.
    Review:  `r? <name>` or `r? @<name>`
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..error import CommandError
from ..token import Token, TokenKind, Tokenizer

_ENDINGS = (TokenKind.DOT, TokenKind.END_OF_LINE)


class AssignParseError(enum.Enum):
    EXPECTED_END = "expected end of command"
    MENTION_USER = "user should start with @"
    NO_USER = "specify user to assign to"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ClaimAssignment:
    """Assign the commenter to the issue."""


@dataclass(frozen=True)
class ReleaseAssignment:
    """Release the current assignment."""


@dataclass(frozen=True)
class AssignUser:
    username: str


@dataclass(frozen=True)
class ReviewName:
    name: str


AssignCommand = ClaimAssignment | ReleaseAssignment | AssignUser | ReviewName


def _at_end(token: Token | None) -> bool:
    return token is not None and token.kind in _ENDINGS


def _parse_terminated(tokenizer: Tokenizer, toks: Tokenizer, command: AssignCommand) -> AssignCommand:
    toks.next_token()
    if _at_end(toks.peek_token()):
        toks.next_token()
        vars(tokenizer).update(vars(toks))
        return command
    raise toks.error(AssignParseError.EXPECTED_END)


def parse(tokenizer: Tokenizer) -> AssignCommand | None:
    """Parse a claim, release or assign command; None if it is not one."""
    toks = tokenizer.copy()
    head = toks.peek_token()
    if head == Token.word("claim"):
        return _parse_terminated(tokenizer, toks, ClaimAssignment())
    if head == Token.word("release-assignment"):
        return _parse_terminated(tokenizer, toks, ReleaseAssignment())
    if head == Token.word("assign"):
        toks.next_token()
        user = toks.next_token()
        if user is None or user.kind is not TokenKind.WORD:
            raise toks.error(AssignParseError.NO_USER)
        if user.text.startswith("@") and len(user.text) != 1:
            return AssignUser(user.text[1:])
        raise toks.error(AssignParseError.MENTION_USER)
    return None


def parse_review(tokenizer: Tokenizer) -> ReviewName:
    """Parse the name following ``r?``; raises CommandError if there is none."""
    try:
        token = tokenizer.next_token()
    except CommandError:
        raise tokenizer.error(AssignParseError.NO_USER) from None
    if token is None or token.kind is not TokenKind.WORD:
        raise tokenizer.error(AssignParseError.NO_USER)
    name = token.text.removeprefix("@")
    if not name:
        raise tokenizer.error(AssignParseError.NO_USER)
    return ReviewName(name)