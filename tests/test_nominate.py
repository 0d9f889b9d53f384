import pytest

from triagebot.parser.commands.nominate import (
    NominateCommand,
    NominateParseError,
    Style,
    parse,
)
from triagebot.parser.error import CommandError
from triagebot.parser.token import Tokenizer


def _parse(text):
    return parse(Tokenizer(text))


def test_nominate():
    assert _parse("nominate compiler.") == NominateCommand("compiler", Style.DECISION)


def test_beta_nominate():
    assert _parse("beta-nominate compiler.") == NominateCommand("compiler", Style.BETA)


def test_trailing_word_is_error():
    with pytest.raises(CommandError) as excinfo:
        _parse("nominate foo foo")
    assert excinfo.value.source is NominateParseError.EXPECTED_END


def test_missing_team():
    with pytest.raises(CommandError) as excinfo:
        _parse("nominate")
    assert excinfo.value.source is NominateParseError.NO_TEAM


@pytest.mark.parametrize("text", ["beta-accept", "beta-approve."])
def test_beta_approve_needs_no_team(text):
    assert _parse(text) == NominateCommand("", Style.BETA_APPROVE)


def test_not_nominate():
    assert _parse("ping compiler") is None


def test_success_advances_input():
    text = "nominate compiler."
    tokenizer = Tokenizer(text)
    parse(tokenizer)
    assert tokenizer.position() == len(text)


def test_failure_does_not_advance_input():
    tokenizer = Tokenizer("nominate foo foo")
    with pytest.raises(CommandError):
        parse(tokenizer)
    assert tokenizer.position() == Tokenizer("nominate foo foo").position()