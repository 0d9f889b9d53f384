"""Parser for the nomination commands.

Grammar::

    `@bot beta-nominate <team>`.
    `@bot nominate <team>`.
    `@bot beta-accept`.
    `@bot beta-approve`.

Only one team may be named per command.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..token import TokenKind, Tokenizer


class NominateParseError(enum.Enum):
    EXPECTED_END = "expected end of command"
    NO_TEAM = "no team specified"

    def __str__(self) -> str:
        return self.value


class Style(enum.Enum):
    BETA = "beta"
    BETA_APPROVE = "beta-approve"
    DECISION = "decision"


@dataclass(frozen=True)
class NominateCommand:
    team: str
    style: Style


_STYLES = {
    "beta-nominate": Style.BETA,
    "nominate": Style.DECISION,
    "beta-accept": Style.BETA_APPROVE,
    "beta-approve": Style.BETA_APPROVE,
}


def parse(tokenizer: Tokenizer) -> NominateCommand | None:
    """Parse a nomination command; None if the input is not one."""
    toks = tokenizer.copy()
    head = toks.peek_token()
    if head is None or head.kind is not TokenKind.WORD or head.text not in _STYLES:
        return None
    style = _STYLES[head.text]
    toks.next_token()
    team = ""
    if style is not Style.BETA_APPROVE:
        token = toks.next_token()
        if token is None or token.kind is not TokenKind.WORD:
            raise toks.error(NominateParseError.NO_TEAM)
        team = token.text
    end = toks.peek_token()
    if end is not None and end.kind in (TokenKind.DOT, TokenKind.END_OF_LINE):
        toks.next_token()
        vars(tokenizer).update(vars(toks))
        return NominateCommand(team, style)
    raise toks.error(NominateParseError.EXPECTED_END)