import pytest

from triagebot.parser.commands.note import NoteCommand, NoteParseError, parse
from triagebot.parser.error import CommandError
from triagebot.parser.token import Tokenizer


def _parse(text):
    return parse(Tokenizer(text))


def test_summary_word():
    assert _parse("note overview") == NoteCommand("overview")


def test_summary_quoted():
    assert _parse('note "long summary title"') == NoteCommand("long summary title")


def test_remove():
    assert _parse("note remove overview") == NoteCommand("overview", remove=True)


def test_repeated_remove():
    assert _parse("note remove remove overview") == NoteCommand("overview", remove=True)


@pytest.mark.parametrize("text", ["note", "note remove", "note ."])
def test_missing_title(text):
    with pytest.raises(CommandError) as excinfo:
        _parse(text)
    assert excinfo.value.source is NoteParseError.MISSING_TITLE


def test_not_note():
    assert _parse("notes overview") is None


def test_does_not_advance_input():
    tokenizer = Tokenizer("note overview")
    before = tokenizer.position()
    assert parse(tokenizer) == NoteCommand("overview")
    assert tokenizer.position() == before