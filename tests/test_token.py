import pytest

from triagebot.parser.error import CommandError
from triagebot.parser.token import (
    Token,
    TokenErrorKind,
    TokenKind,
    Tokenizer,
    tokenize,
)

W = Token.word
EOL = Token(TokenKind.END_OF_LINE)
DOT = Token(TokenKind.DOT)
COMMA = Token(TokenKind.COMMA)


def _error(text):
    with pytest.raises(CommandError) as info:
        tokenize(text)
    return info.value.position, info.value.source


def test_tokenize_1():
    assert tokenize("foo\t\r\n\n bar\nbaz\n") == [
        W("foo"), EOL, EOL, W("bar"), EOL, W("baz"), EOL, EOL,
    ]


def test_tokenize_2():
    assert tokenize(",,,.,.,") == [COMMA, COMMA, COMMA, DOT, COMMA, DOT, COMMA, EOL]


def test_tokenize_whitespace_dots():
    assert tokenize("baz . ,bar ") == [W("baz"), DOT, COMMA, W("bar"), EOL]


def test_tokenize_3():
    assert tokenize("bar, and -baz") == [W("bar"), COMMA, W("and"), W("-baz"), EOL]


def test_tokenize_4():
    assert tokenize(", , b") == [COMMA, COMMA, W("b"), EOL]


def test_tokenize_5():
    assert tokenize('"testing"') == [Token.quote("testing"), EOL]


def test_tokenize_6():
    assert _error('"testing') == (8, TokenErrorKind.UNTERMINATED_STRING)


def test_tokenize_7():
    assert _error('wordy wordy word"quoteno') == (16, TokenErrorKind.QUOTE_IN_WORD)


def test_tokenize_raw_string_prohibit():
    assert _error('r#""#') == (2, TokenErrorKind.RAW_STRING)


def test_tokenize_raw_string_prohibit_1():
    assert _error('map_of_arkansas_r#""#') == (18, TokenErrorKind.QUOTE_IN_WORD)


def test_all_punctuation():
    kinds = [t.kind for t in tokenize(".,;!?:()")]
    assert kinds == [
        TokenKind.DOT, TokenKind.COMMA, TokenKind.SEMI, TokenKind.EXCLAMATION,
        TokenKind.QUESTION, TokenKind.COLON, TokenKind.PAREN_LEFT,
        TokenKind.PAREN_RIGHT, TokenKind.END_OF_LINE,
    ]


def test_empty_input_yields_single_end_of_line():
    assert tokenize("") == [EOL]


def test_peek_does_not_advance():
    tok = Tokenizer("hello world")
    assert tok.peek_token() == W("hello")
    assert tok.position() == 0
    assert tok.next_token() == W("hello")
    assert tok.position() == 5


def test_eat_token():
    tok = Tokenizer("modify labels")
    assert tok.eat_token(W("labels")) is False
    assert tok.eat_token(W("modify")) is True
    assert tok.next_token() == W("labels")


def test_copy_is_independent():
    tok = Tokenizer("a b")
    clone = tok.copy()
    assert clone.next_token() == W("a")
    assert tok.position() == 0
    assert tok.next_token() == W("a")


def test_exhausted_tokenizer_returns_none():
    tok = Tokenizer("x")
    assert tok.next_token() == W("x")
    assert tok.next_token() == EOL
    assert tok.next_token() is None
    assert tok.next_token() is None


def test_error_records_position():
    tok = Tokenizer("abc def")
    tok.next_token()
    err = tok.error(TokenErrorKind.QUOTE_IN_WORD)
    assert err.position == 3
    assert err.text == "abc def"
    assert err.source is TokenErrorKind.QUOTE_IN_WORD


def test_token_display():
    rendered = [str(t) for t in tokenize('a, "q".')]
    assert rendered == ["a", ",", '"q"', ".", ""]


@pytest.mark.parametrize(
    "text, message",
    [
        ('"testing', "unterminated string"),
        ('word"quote', "quote in word"),
        ('r#""#', "raw strings are not yet supported"),
    ],
)
def test_error_kind_messages(text, message):
    with pytest.raises(CommandError) as info:
        tokenize(text)
    assert str(info.value.source) == message