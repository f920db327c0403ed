import pytest

from arith import Scanner, Token, Type, tokenize
from arith.error.scanner_error import ScannerException
from arith.util import INT_MAX, Span
from tests.test_util import open_file

from arith.error.scanner_error import (  # isort:skip
    NumberOutOfRangeError,
    UnexpectedCharacterError,
)


def test_scan_simple():
    scanner = Scanner("2 + (3 * 4)")
    tokens = scanner.scan()

    expected = [
        Token.number(2),
        Token.of(Type.PLUS),
        Token.of(Type.LRB),
        Token.number(3),
        Token.of(Type.STAR),
        Token.number(4),
        Token.of(Type.RRB),
    ]

    assert tokens == expected


def test_scan_long_digits():
    tokens = tokenize("12 - 456 / 1234")

    assert tokens == [
        Token.number(12),
        Token.of(Type.MINUS),
        Token.number(456),
        Token.of(Type.SLASH),
        Token.number(1234),
    ]
    assert [token.value for token in tokens] == [12, None, 456, None, 1234]


def test_scan_without_spaces():
    assert tokenize("1+2") == tokenize("1 + 2") == tokenize("\t1\n+  2\n")


def test_empty():
    scanner = Scanner("")
    tokens = scanner.scan()
    assert tokens == []


def test_only_whitespace():
    assert tokenize(" \t\n  \n\t") == []


def test_spans():
    tokens = tokenize("12 +\n (3)")

    assert tokens[0].span == Span(1, (0, 2))
    assert tokens[1].span == Span(1, (3, 4))
    assert tokens[2].span == Span(2, (1, 2))
    assert tokens[3].span == Span(2, (2, 3))
    assert tokens[4].span == Span(2, (3, 4))


def test_token_equality_ignores_span():
    tokens = tokenize("   7")
    assert tokens == [Token.number(7)]
    assert tokens[0].span != Token.number(7).span

    assert Token("007", Type.NUMBER) == Token.number(7)
    assert Token("+", "PLUS") == Token.of(Type.PLUS)
    assert Token.of(Type.PLUS) != Token.of(Type.MINUS)
    assert Token.number(1) != Token.number(2)
    assert len({Token.number(3), Token("3", Type.NUMBER, Span(1, (0, 1)))}) == 1


def test_scan(valid_file: str):
    program: str = open_file(valid_file)
    tokens = tokenize(program)
    # Ensure that we get a non-empty list of tokens, and that nothing is skipped
    assert tokens
    assert "".join(token.text for token in tokens) == "".join(program.split())


def test_UnexpectedCharacterError():
    with pytest.raises(ScannerException) as excinfo:
        Scanner("2 & 4").scan()

    error = excinfo.value.error
    assert isinstance(error, UnexpectedCharacterError)
    assert error.character == "&"
    assert error.span == Span(1, (2, 3))
    assert "ScannerError" in str(excinfo.value)
    assert "'&'" in str(excinfo.value)
    assert "line [1] column [2]" in str(excinfo.value)
    assert "-> 1. " in str(excinfo.value)


def test_UnexpectedCharacterError_first_only():
    # Scanning stops at the first invalid character
    with pytest.raises(ScannerException) as excinfo:
        tokenize("1 + 2\n3 $ 4 & 5")

    assert excinfo.value.error.character == "$"
    assert excinfo.value.error.span == Span(2, (2, 3))


@pytest.mark.parametrize("program", ["1.5", "-x", "2 ^ 3", "1 +\r\n2", "٣", "[1]"])
def test_UnexpectedCharacterError_unsupported(program: str):
    with pytest.raises(ScannerException) as excinfo:
        tokenize(program)
    assert isinstance(excinfo.value.error, UnexpectedCharacterError)


def test_int_max():
    tokens = tokenize(str(INT_MAX))
    assert tokens == [Token.number(INT_MAX)]


def test_leading_zeros():
    tokens = tokenize("0" * 40 + "42")
    assert tokens == [Token.number(42)]


@pytest.mark.parametrize("digits", [str(INT_MAX + 1), "99999999999999999999", "9" * 5000])
def test_NumberOutOfRangeError(digits: str):
    program = "1 + " + digits
    with pytest.raises(ScannerException) as excinfo:
        tokenize(program)

    error = excinfo.value.error
    assert isinstance(error, NumberOutOfRangeError)
    assert error.span == Span(1, (4, 4 + len(digits)))
    assert str(INT_MAX) in str(excinfo.value)


@pytest.mark.parametrize("text", ["x", "", "-5", "1.5", "٣"])
def test_invalid_number_token(text: str):
    with pytest.raises(ValueError):
        Token(text, Type.NUMBER)


def test_negative_number_token():
    with pytest.raises(ValueError):
        Token.number(-5)
