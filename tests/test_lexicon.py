import pytest

from assertkit.lexicon import (
    LiteralFormat,
    Token,
    TokenType,
    get_literal_format,
    is_bitwise,
    normalize_brace,
    normalize_op,
    precedence_of,
    trim_suffix,
)


@pytest.mark.parametrize(
    "literal, expected",
    [
        ("0b101001010", LiteralFormat.INTEGER_BINARY),
        ("066", LiteralFormat.INTEGER_OCTAL),
        ("0x4fefe", LiteralFormat.INTEGER_HEX),
        ("0x1.1p+10", LiteralFormat.FLOAT_HEX),
        ("100", LiteralFormat.DEFAULT),
        ("0", LiteralFormat.DEFAULT),
        ("1.e-2", LiteralFormat.DEFAULT),
        (".12f", LiteralFormat.DEFAULT),
        ("'\\n'", LiteralFormat.DEFAULT),
        ("foobar", LiteralFormat.DEFAULT),
    ],
)
def test_literal_formats(literal, expected):
    assert get_literal_format(literal) is expected


def test_integer_suffixes_keep_format():
    assert get_literal_format("0x4fefeULL") is LiteralFormat.INTEGER_HEX
    assert get_literal_format("0b1u") is LiteralFormat.INTEGER_BINARY


def test_hex_digit_separator_not_first():
    assert get_literal_format("0x'1") is LiteralFormat.DEFAULT


def test_trim_suffix_removes_suffix_letters():
    assert trim_suffix("100ULL") == "100"
    assert trim_suffix("1.5f") == "1.5"


def test_trim_suffix_all_suffix_chars_gives_empty():
    assert trim_suffix("uLL") == ""


def test_trim_suffix_leaves_plain_number():
    assert trim_suffix("0x4fefe") == "0x4fefe"


@pytest.mark.parametrize("op", ["^", "&", "|", "bitand", "xor_eq"])
def test_bitwise_operators(op):
    assert is_bitwise(op) is True


@pytest.mark.parametrize("op", ["&&", "||", "==", "and"])
def test_non_bitwise_operators(op):
    assert is_bitwise(op) is False


@pytest.mark.parametrize(
    "alt, symbol",
    [("and", "&&"), ("or", "||"), ("not_eq", "!="), ("compl", "~"), ("bitor", "|")],
)
def test_normalize_op(alt, symbol):
    assert normalize_op(alt) == symbol


def test_normalize_op_passes_through_symbols():
    assert normalize_op("==") == "=="


@pytest.mark.parametrize(
    "digraph, brace", [("<:", "["), ("<%", "{"), (":>", "]"), ("%>", "}")]
)
def test_normalize_brace(digraph, brace):
    assert normalize_brace(digraph) == brace


def test_normalize_brace_passes_through():
    assert normalize_brace("(") == "("


def test_precedence_values():
    assert precedence_of("<<") == -1
    assert precedence_of("==") == -4
    assert precedence_of(",") == -11


def test_precedence_ordering():
    assert precedence_of("&&") < precedence_of("|") < precedence_of("==")
    assert precedence_of("=") == precedence_of("?") == precedence_of("|=")


def test_precedence_of_unlisted_is_none():
    assert precedence_of("+") is None
    assert precedence_of("and") is None


def test_precedence_after_normalisation():
    assert precedence_of(normalize_op("and")) == precedence_of("&&")


def test_tokens_compare_by_value():
    assert Token(TokenType.IDENTIFIER, "foo") == Token(TokenType.IDENTIFIER, "foo")
    assert Token(TokenType.IDENTIFIER, "foo") != Token(TokenType.KEYWORD, "foo")


def test_token_is_immutable():
    token = Token(TokenType.NUMBER, "12")
    with pytest.raises(AttributeError):
        token.text = "13"
    assert token == Token(TokenType.NUMBER, "12")
    assert token != Token(TokenType.NUMBER, "13")