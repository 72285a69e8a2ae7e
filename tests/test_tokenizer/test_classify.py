import pytest

from optkit.exceptions import InvalidUsageError
from optkit.tokenizer import OptionRequest, Token, TokenKind, classify


@pytest.mark.parametrize("raw", ["", "-", "a", "prog", "image.bin", "a=b"])
def test_positional(raw):
    token = classify(raw)
    assert token.kind is TokenKind.POSITIONAL
    assert token.name == raw
    assert not token.is_option
    assert token.requests() == []


def test_end_of_options():
    token = classify("--")
    assert token.kind is TokenKind.END_OF_OPTIONS
    assert token.requests() == []


def test_long_without_value():
    token = classify("--verbose")
    assert token == Token("--verbose", TokenKind.LONG, "verbose", False, "")
    assert token.requests() == [OptionRequest("verbose", TokenKind.LONG)]


@pytest.mark.parametrize(
    "raw, name, value",
    [
        ("--ls=some other value", "ls", "some other value"),
        ("--name=", "name", ""),
        ("--expr=a=b=c", "expr", "a=b=c"),
        ("--=value", "", "value"),
    ],
)
def test_long_with_value(raw, name, value):
    token = classify(raw)
    assert token.kind is TokenKind.LONG
    assert token.name == name
    assert token.has_value is True
    assert token.value == value
    assert token.requests() == [OptionRequest(name, TokenKind.LONG, True, value)]


def test_triple_dash_is_long():
    token = classify("---x")
    assert token.kind is TokenKind.LONG
    assert token.name == "-x"


def test_short_bundle():
    token = classify("-abc")
    assert token.kind is TokenKind.SHORT
    assert token.name == "abc"
    assert [request.name for request in token.requests()] == ["a", "b", "c"]
    assert not any(request.has_value for request in token.requests())


def test_short_bundle_value_goes_to_last():
    requests = classify("-ij=100").requests()
    assert requests == [
        OptionRequest("i", TokenKind.SHORT),
        OptionRequest("j", TokenKind.SHORT, True, "100"),
    ]


def test_single_short_with_value():
    assert classify("-j=4").requests() == [OptionRequest("j", TokenKind.SHORT, True, "4")]
    assert classify("-j=").requests() == [OptionRequest("j", TokenKind.SHORT, True, "")]


def test_short_missing_name():
    token = classify("-=5")
    assert token.kind is TokenKind.SHORT
    with pytest.raises(InvalidUsageError):
        token.requests()


def test_request_flag():
    assert OptionRequest("j", TokenKind.SHORT).flag == "-j"
    assert OptionRequest("js", TokenKind.LONG).flag == "--js"
