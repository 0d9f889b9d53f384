import pytest

from triagebot.parser.mentions import get_mentions


def test_mentions_in_code_ignored():
    assert get_mentions("@rust-lang/libs `@user`") == ["rust-lang/libs"]
    assert get_mentions("@user `@user`") == ["user"]
    assert get_mentions("`@user`") == []


def test_italics():
    assert get_mentions("*@rust-lang/libs*") == ["rust-lang/libs"]


def test_slash():
    assert get_mentions("@rust-lang/libs/@rust-lang/release") == [
        "rust-lang/libs",
        "rust-lang/release",
    ]


def test_no_panic_lone():
    assert get_mentions("@ `@`") == []


def test_no_email():
    assert get_mentions("user@example.com") == []


@pytest.mark.parametrize(
    "text, expected",
    [
        ("cc @alice and @bob", ["alice", "bob"]),
        ("(@carol)", ["carol"]),
        ("1@dave", ["dave"]),
        ("@", []),
    ],
)
def test_separators(text, expected):
    assert get_mentions(text) == expected


def test_mentions_in_code_block_and_quote_ignored():
    text = "```\n@hidden\n```\n\n> @quoted\n\n@shown"
    assert get_mentions(text) == ["shown"]