import pytest

from triagebot.parser.commands.assign import (
    AssignParseError,
    AssignUser,
    ClaimAssignment,
    ReleaseAssignment,
    ReviewName,
    parse,
    parse_review,
)
from triagebot.parser.error import CommandError
from triagebot.parser.token import Tokenizer


def _parse(text):
    return parse(Tokenizer(text))


def _parse_review(text):
    return parse_review(Tokenizer(text))


def test_claim_with_dot():
    assert _parse("claim.") == ClaimAssignment()


def test_claim_without_dot():
    assert _parse("claim") == ClaimAssignment()


def test_assign_user():
    assert _parse("assign @user") == AssignUser("user")


def test_assign_lone_at_is_error():
    with pytest.raises(CommandError) as excinfo:
        _parse("assign @")
    assert excinfo.value.source is AssignParseError.MENTION_USER


def test_assign_without_at():
    with pytest.raises(CommandError) as excinfo:
        _parse("assign user")
    assert excinfo.value.source is AssignParseError.MENTION_USER


def test_assign_without_user():
    with pytest.raises(CommandError) as excinfo:
        _parse("assign")
    assert excinfo.value.source is AssignParseError.NO_USER


def test_release_assignment():
    assert _parse("release-assignment") == ReleaseAssignment()


def test_claim_with_trailing_word_is_error():
    with pytest.raises(CommandError) as excinfo:
        _parse("claim foo")
    assert excinfo.value.source is AssignParseError.EXPECTED_END


def test_unrelated_word():
    assert _parse("hello world") is None


@pytest.mark.parametrize("text", ["claim.", "claim", "release-assignment."])
def test_successful_terminated_command_advances(text):
    tokenizer = Tokenizer(text)
    parse(tokenizer)
    assert tokenizer.position() == len(text)


def test_assign_does_not_advance_input():
    tokenizer = Tokenizer("assign @user")
    assert parse(tokenizer) == AssignUser("user")
    assert tokenizer.position() == Tokenizer("assign @user").position()


@pytest.mark.parametrize(
    "text, message",
    [
        ("assign", "specify user to assign to"),
        ("assign user", "user should start with @"),
        ("claim foo", "expected end of command"),
    ],
)
def test_error_message(text, message):
    with pytest.raises(CommandError) as excinfo:
        _parse(text)
    assert str(excinfo.value.source) == message


@pytest.mark.parametrize(
    "text, name",
    [
        ("octocat", "octocat"),
        ("@octocat", "octocat"),
        ("rust-lang/compiler", "rust-lang/compiler"),
        ("@rust-lang/cargo", "rust-lang/cargo"),
        ("abc xyz", "abc"),
        ("@user?", "user"),
        ("@user.", "user"),
        ("@user!", "user"),
    ],
)
def test_review_names(text, name):
    assert _parse_review(text) == ReviewName(name)


@pytest.mark.parametrize("text", ["", "@", "@ user"])
def test_review_names_errors(text):
    with pytest.raises(CommandError) as excinfo:
        _parse_review(text)
    assert excinfo.value.source is AssignParseError.NO_USER


def test_review_tokenizer_error_becomes_no_user():
    with pytest.raises(CommandError) as excinfo:
        _parse_review('"unterminated')
    assert excinfo.value.source is AssignParseError.NO_USER