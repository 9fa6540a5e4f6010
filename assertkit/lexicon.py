"""Tokens, operator tables and literal classification for C++ expressions."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

__all__ = [
    "TokenType",
    "Token",
    "LiteralFormat",
    "get_literal_format",
    "trim_suffix",
    "is_bitwise",
    "normalize_op",
    "normalize_brace",
    "precedence_of",
]


class TokenType(enum.Enum):
    """Kinds of lexical token in an expression."""

    KEYWORD = "keyword"
    PUNCTUATION = "punctuation"
    NAMED_LITERAL = "named_literal"
    NUMBER = "number"
    STRING = "string"
    IDENTIFIER = "identifier"
    WHITESPACE = "whitespace"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Token:
    """A single token: its kind and the exact source text."""

    type: TokenType
    text: str


class LiteralFormat(enum.Enum):
    """How a literal was written, used to echo values back in the same base."""

    DEFAULT = "default"
    INTEGER_BINARY = "integer_binary"
    INTEGER_OCTAL = "integer_octal"
    INTEGER_HEX = "integer_hex"
    FLOAT_HEX = "float_hex"


# Template angle brackets are deliberately not listed.
BRACES: dict[str, str] = {"(": ")", "{": "}", "[": "]", "<:": ":>", "<%": "%>"}

DIGRAPHS: dict[str, str] = {"<:": "[", "<%": "{", ":>": "]", "%>": "}"}

HIGHLIGHT_OPS: frozenset[str] = frozenset({
    "~", "!", "+", "-", "*", "/", "%", "^", "&", "|", "=", "+=", "-=", "*=", "/=", "%=",
    "^=", "&=", "|=", "==", "!=", "<", ">", "<=", ">=", "<=>", "&&", "||", "<<", ">>",
    "<<=", ">>=", "++", "--", "and", "or", "xor", "not", "bitand", "bitor", "compl",
    "and_eq", "or_eq", "xor_eq", "not_eq",
})

OPERATORS: frozenset[str] = frozenset({
    ":", "...", "?", "::", ".", ".*", "->", "->*", "~", "!", "+", "-", "*", "/", "%", "^",
    "&", "|", "=", "+=", "-=", "*=", "/=", "%=", "^=", "&=", "|=", "==", "!=", "<", ">",
    "<=", ">=", "<=>", "&&", "||", "<<", ">>", "<<=", ">>=", "++", "--", ",", "and", "or",
    "xor", "not", "bitand", "bitor", "compl", "and_eq", "or_eq", "xor_eq", "not_eq",
})

ALTERNATIVE_OPERATORS: dict[str, str] = {
    "and": "&&", "or": "||", "xor": "^", "not": "!", "bitand": "&",
    "bitor": "|", "compl": "~", "and_eq": "&=", "or_eq": "|=", "xor_eq": "^=",
    "not_eq": "!=",
}

BITWISE_OPERATORS: frozenset[str] = frozenset({
    "^", "&", "|", "^=", "&=", "|=", "xor", "bitand", "bitor", "and_eq", "or_eq", "xor_eq",
})

# Bottom rows of the binary operator precedence table; lower binds looser.
# Assignment and conditional operators share -10, which callers rely on for
# right associativity.
_PRECEDENCE_ROWS: dict[int, tuple[str, ...]] = {
    -1: ("<<", ">>"),
    -2: ("<=>",),
    -3: ("<", "<=", ">=", ">"),
    -4: ("==", "!="),
    -5: ("&",),
    -6: ("^",),
    -7: ("|",),
    -8: ("&&",),
    -9: ("||",),
    -10: ("?", ":", "=", "+=", "-=", "*=", "/=", "%=", "<<=", ">>=", "&=", "^=", "|="),
    -11: (",",),
}

PRECEDENCE: dict[str, int] = {
    op: level for level, ops in _PRECEDENCE_ROWS.items() for op in ops
}

ASSIGNMENT_PRECEDENCE = -10

_ESCAPES = r"\\[0-7]{1,3}|\\x[\da-fA-F]+|\\."
ESCAPES_RE = re.compile(_ESCAPES, re.ASCII)


def _build_literal_formats() -> tuple[tuple[re.Pattern[str], LiteralFormat], ...]:
    int_suffix = "(?:[Uu](?:LL?|ll?|Z|z)?|(?:LL?|ll?|Z|z)[Uu]?)?"
    int_binary = "0[Bb][01](?:'?[01])*" + int_suffix
    # 0 alone lexes as decimal rather than octal.
    int_octal = "0(?:'?[0-7])+" + int_suffix
    int_decimal = r"(?:0|[1-9](?:'?\d)*)" + int_suffix
    int_hex = r"0[Xx](?!')(?:'?[\da-fA-F])+" + int_suffix
    digits = r"\d(?:'?\d)*"
    fractional = rf"(?:(?:{digits})?\.{digits}|{digits}\.)"
    exponent = rf"(?:[Ee][\+-]?{digits})"
    float_suffix = "[FfLl]"
    float_decimal = f"(?:{fractional}{exponent}?|{digits}{exponent}){float_suffix}?"
    hex_digits = r"[\da-fA-F](?:'?[\da-fA-F])*"
    hex_fractional = rf"(?:(?:{hex_digits})?\.{hex_digits}|{hex_digits}\.)"
    binary_exponent = rf"[Pp][\+-]?{digits}"
    float_hex = f"0[Xx](?:{hex_fractional}|{hex_digits}){binary_exponent}{float_suffix}?"
    char_literal = r"(?:u8|[UuL])?'(?:" + _ESCAPES + r"|[^\n'])*'"
    rules = (
        (int_binary, LiteralFormat.INTEGER_BINARY),
        (int_octal, LiteralFormat.INTEGER_OCTAL),
        (int_decimal, LiteralFormat.DEFAULT),
        (int_hex, LiteralFormat.INTEGER_HEX),
        (float_decimal, LiteralFormat.DEFAULT),
        (float_hex, LiteralFormat.FLOAT_HEX),
        (char_literal, LiteralFormat.DEFAULT),
    )
    return tuple((re.compile(pattern, re.ASCII), fmt) for pattern, fmt in rules)


_LITERAL_FORMATS = _build_literal_formats()


def get_literal_format(expression: str) -> LiteralFormat:
    """Classify how a literal is written; non-literals give the default format."""
    for pattern, fmt in _LITERAL_FORMATS:
        if pattern.fullmatch(expression):
            return fmt
    return LiteralFormat.DEFAULT


def trim_suffix(expression: str) -> str:
    """Strip trailing numeric literal suffix characters."""
    return expression.rstrip("FfUuLlZz")


def is_bitwise(op: str) -> bool:
    """Whether op is a bitwise operator, in symbolic or alternative spelling."""
    return op in BITWISE_OPERATORS


def normalize_op(op: str) -> str:
    """Map alternative operator spellings such as 'and' to their symbols."""
    return ALTERNATIVE_OPERATORS.get(op, op)


def normalize_brace(brace: str) -> str:
    """Map digraph braces such as '<:' to their ordinary form."""
    return DIGRAPHS.get(brace, brace)


def precedence_of(op: str) -> int | None:
    """Precedence level of a low-precedence binary operator, or None if not tabled."""
    return PRECEDENCE.get(op)