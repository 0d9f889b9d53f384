import pytest

from triagebot.parser.commands.ping import PingCommand, PingParseError, parse
from triagebot.parser.error import CommandError
from triagebot.parser.token import Tokenizer


def _parse(text):
    return parse(Tokenizer(text))


def test_ping_team():
    assert _parse("ping LLVM-icebreakers.") == PingCommand("LLVM-icebreakers")


def test_trailing_word_is_error():
    with pytest.raises(CommandError) as excinfo:
        _parse("ping foo foo")
    assert excinfo.value.source is PingParseError.EXPECTED_END


def test_missing_team():
    with pytest.raises(CommandError) as excinfo:
        _parse("ping")
    assert excinfo.value.source is PingParseError.NO_TEAM


def test_not_ping():
    assert _parse("pong team") is None


def test_success_advances_input():
    text = "ping LLVM-icebreakers."
    tokenizer = Tokenizer(text)
    parse(tokenizer)
    assert tokenizer.position() == len(text)


@pytest.mark.parametrize(
    "text, message",
    [
        ("ping", "no team specified"),
        ("ping foo foo", "expected end of command"),
    ],
)
def test_error_message(text, message):
    with pytest.raises(CommandError) as excinfo:
        _parse(text)
    assert str(excinfo.value.source) == message