"""Readable text for arbitrary values shown in assertion diagnostics."""

from __future__ import annotations

import enum
import os
import threading
from collections.abc import Callable, Collection, Iterator, Mapping
from contextlib import contextmanager
from typing import Any

__all__ = ["register_stringifier", "stringify", "generate_stringification"]

MAX_CONTAINER_ITEMS = 1000

_registry: dict[type, Callable[[Any], str]] = {}
_state = threading.local()

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\0": "\\0",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\v": "\\v",
}


def register_stringifier(cls: type, func: Callable[[Any], str]) -> None:
    """Use func to render instances of cls and its subclasses, ahead of any default."""
    if not isinstance(cls, type):
        raise TypeError(f"expected a class, got {cls!r}")
    if not callable(func):
        raise TypeError(f"stringifier for {cls.__qualname__} is not callable")
    _registry[cls] = func


def _type_name(value: Any) -> str:
    cls = type(value)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def _unknown(value: Any) -> str:
    return f"<instance of {_type_name(value)}>"


def _quote(text: str) -> str:
    escaped = "".join(
        _ESCAPES.get(char, f"\\x{ord(char):02x}" if ord(char) < 0x20 else char)
        for char in text
    )
    return f'"{escaped}"'


def _find_stringifier(value: Any) -> Callable[[Any], str] | None:
    for klass in type(value).__mro__:
        func = _registry.get(klass)
        if func is not None:
            return func
    return None


def _active_ids() -> set[int]:
    ids = getattr(_state, "active", None)
    if ids is None:
        ids = set()
        _state.active = ids
    return ids


@contextmanager
def _guard(value: Any) -> Iterator[bool]:
    """Yield True if value is already being rendered further up this thread's stack."""
    ids = _active_ids()
    key = id(value)
    if key in ids:
        yield True
        return
    ids.add(key)
    try:
        yield False
    finally:
        ids.discard(key)


def _stringify_enum(value: enum.Enum) -> str:
    if value.name:
        return value.name
    return f"enum {_type_name(value)}: {stringify(value.value)}"


def _stringify_tuple_like(items: tuple[Any, ...]) -> str:
    return "[" + ", ".join(stringify(item) for item in items) + "]"


def _stringify_container(items: Any) -> str:
    parts: list[str] = []
    for item in items:
        parts.append(stringify(item))
        if len(parts) == MAX_CONTAINER_ITEMS:
            parts.append("...")
            break
    return "[" + ", ".join(parts) + "]"


def _has_own_text(value: Any) -> bool:
    cls = type(value)
    return cls.__str__ is not object.__str__ or cls.__repr__ is not object.__repr__


def _dispatch(value: Any) -> str:
    custom = _find_stringifier(value)
    if custom is not None:
        return custom(value)
    if value is None:
        return "nullptr"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, enum.Enum):
        return _stringify_enum(value)
    if isinstance(value, os.PathLike):
        return _quote(os.fspath(value) if not isinstance(value, bytes) else str(value))
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, tuple):
        return _stringify_tuple_like(value)
    if isinstance(value, Mapping):
        return _stringify_container((key, item) for key, item in value.items())
    if isinstance(value, Collection):
        return _stringify_container(value)
    if _has_own_text(value):
        return str(value)
    return _unknown(value)


def stringify(value: Any) -> str:
    """Render a value for a diagnostic message.

    Registered stringifiers come first, then built-in renderings for strings,
    numbers, enums, paths, tuples, mappings and other collections, then the
    value's own str(). Collections print at most MAX_CONTAINER_ITEMS items, and
    a value met again while it is being rendered falls back to its type.
    """
    with _guard(value) as recursing:
        if recursing:
            return _unknown(value)
        return _dispatch(value)


def _shows_type(value: Any) -> bool:
    if isinstance(value, (str, bytes, bytearray, os.PathLike)):
        return False
    return isinstance(value, (tuple, Mapping, Collection))


def generate_stringification(value: Any) -> str:
    """Render a value, prefixed by its type name when it is a container or tuple."""
    if _shows_type(value):
        return f"{_type_name(value)}: {stringify(value)}"
    return stringify(value)