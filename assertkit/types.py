"""Cleanup of compiler-produced type names into a readable form."""

from __future__ import annotations

import re
from collections.abc import Iterable

__all__ = ["union_regexes", "prettify_type"]

_COMMA_RE = re.compile(r"\s*,\s*")
_CLASS_RE = re.compile(r"\b(class|struct)\s+")
_MSVC_ANONYMOUS_NAMESPACE = "`anonymous namespace'"

# Each rule replaces a matched template, up to and including its closing
# angle bracket, with the given text.
_TEMPLATE_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"std(::[a-zA-Z0-9_]+)?::basic_string<char"), "std::string"),
    (re.compile(r"std(::[a-zA-Z0-9_]+)?::basic_string_view<char"), "std::string_view"),
    (re.compile(r",\s*std(::[a-zA-Z0-9_]+)?::allocator<"), ""),
    (re.compile(r",\s*std(::[a-zA-Z0-9_]+)?::default_delete<"), ""),
)


def union_regexes(regexes: Iterable[str]) -> str:
    """Join patterns into one alternation, each wrapped in a non-capturing group."""
    return "|".join(f"(?:{pattern})" for pattern in regexes)


def _replace_all_collapsing(text: str, old: str, new: str) -> str:
    while old in text:
        text = text.replace(old, new)
    return text


def _template_end(text: str, start: int) -> int:
    """Index just past the closing bracket of the template opened at or after start."""
    depth = 0
    for index in range(start, len(text)):
        char = text[index]
        if char == "<":
            depth += 1
        elif char == ">":
            depth -= 1
            if depth == 0:
                return index + 1
    return len(text)


def _replace_all_template(text: str, pattern: re.Pattern[str], replacement: str) -> str:
    position = 0
    while (match := pattern.search(text, position)) is not None:
        start = match.start()
        end = _template_end(text, start)
        text = text[:start] + replacement + text[end:]
        position = start + len(replacement)
    return text


def prettify_type(type_name: str) -> str:
    """Return a shorter, normalised spelling of a C++ type name."""
    text = _replace_all_collapsing(type_name, "> >", ">>")
    text = _COMMA_RE.sub(", ", text)
    text = _CLASS_RE.sub("", text)
    text = text.replace(_MSVC_ANONYMOUS_NAMESPACE, "(anonymous namespace)")
    for pattern, replacement in _TEMPLATE_RULES:
        text = _replace_all_template(text, pattern, replacement)
    return text.replace("std::__cxx11::", "std::")