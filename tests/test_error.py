import pytest

from triagebot.parser.error import CommandError


def test_message_shows_context_around_position():
    err = CommandError("abcdefghijklmnopqrstuvwxyz", 12, ValueError("bad"))
    assert str(err) == "...'cdefghijkl' | error: bad at >| 'mnopqrstuv'..."


def test_message_at_start_has_empty_prefix():
    err = CommandError("ab", 0, ValueError("x"))
    assert str(err) == "...'' | error: x at >| 'ab'..."


def test_message_at_end_has_empty_suffix():
    err = CommandError("abc", 3, ValueError("oops"))
    assert str(err).endswith(">| ''...")
    assert "error: oops" in str(err)


def test_equality_ignores_source():
    first = CommandError("abc", 1, ValueError("a"))
    second = CommandError("abc", 1, KeyError("b"))
    other_position = CommandError("abc", 2, ValueError("a"))
    other_text = CommandError("abd", 1, ValueError("a"))
    assert first == second
    assert not (first == other_position)
    assert not (first == other_text)


def test_equal_errors_hash_alike():
    first = CommandError("abc", 1, ValueError("a"))
    second = CommandError("abc", 1, ValueError("b"))
    assert len({first, second}) == 1


def test_attributes_and_cause():
    cause = ValueError("inner")
    err = CommandError("some input", 4, cause)
    assert err.text == "some input"
    assert err.position == 4
    assert err.source is cause
    with pytest.raises(CommandError) as info:
        raise err
    assert info.value.__cause__ is cause