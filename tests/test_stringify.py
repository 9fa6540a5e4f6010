import enum
from collections import namedtuple
from pathlib import PurePosixPath

import pytest

from assertkit.stringify import (
    MAX_CONTAINER_ITEMS,
    generate_stringification,
    register_stringifier,
    stringify,
)


class Color(enum.Enum):
    RED = 1
    GREEN = 2


class Opaque:
    pass


class Talker:
    def __str__(self):
        return "I talk"


class Widget:
    def __init__(self, size):
        self.size = size


class BigWidget(Widget):
    pass


Point = namedtuple("Point", "x y")


def test_integer():
    assert stringify(12) == "12"


def test_pair_with_type_prefix():
    assert generate_stringification(("foobar", 20)) == 'tuple: ["foobar", 20]'


def test_bools_and_none():
    assert stringify(True) == "true"
    assert stringify(False) == "false"
    assert stringify(None) == "nullptr"


def test_float():
    assert stringify(2.5) == "2.5"


def test_string_escaping():
    assert stringify('a"b\n') == '"a\\"b\\n"'
    assert stringify("tab\there\\") == '"tab\\there\\\\"'


def test_list_and_nested():
    assert stringify([1, [2, 3], "x"]) == '[1, [2, 3], "x"]'


def test_dict_renders_pairs():
    assert stringify({"foo": 2, "bar": -2}) == '[["foo", 2], ["bar", -2]]'
    assert generate_stringification({"a": [1, -2]}) == 'dict: [["a", [1, -2]]]'


def test_container_limit():
    text = stringify(list(range(MAX_CONTAINER_ITEMS + 5)))
    assert text.endswith("998, 999, ...]")
    assert text.count(",") == MAX_CONTAINER_ITEMS


def test_container_at_exact_limit_is_marked():
    assert stringify(list(range(MAX_CONTAINER_ITEMS))).endswith("999, ...]")


def test_container_below_limit_is_not_marked():
    assert stringify(list(range(MAX_CONTAINER_ITEMS - 1))).endswith("997, 998]")


def test_tuple_has_no_limit():
    text = stringify(tuple(range(MAX_CONTAINER_ITEMS + 2)))
    assert text.endswith("1000, 1001]")


def test_self_referential_list():
    items = [1]
    items.append(items)
    assert stringify(items) == "[1, <instance of list>]"


def test_enum_uses_member_name():
    assert stringify(Color.GREEN) == "GREEN"


def test_path_is_quoted_without_prefix():
    path = PurePosixPath("/tmp/x")
    assert stringify(path) == '"/tmp/x"'
    assert generate_stringification(path) == '"/tmp/x"'


def test_object_with_str():
    assert stringify(Talker()) == "I talk"


def test_unknown_object():
    text = stringify(Opaque())
    assert text.startswith("<instance of ")
    assert text.endswith("Opaque>")


def test_registered_stringifier_applies_to_subclasses():
    register_stringifier(Widget, lambda w: f"Widget({w.size})")
    assert stringify(Widget(3)) == "Widget(3)"
    assert stringify([BigWidget(4)]) == "[Widget(4)]"


def test_register_rejects_non_class():
    with pytest.raises(TypeError):
        register_stringifier("Widget", str)


def test_register_rejects_non_callable():
    with pytest.raises(TypeError):
        register_stringifier(Widget, "not callable")


def test_namedtuple_is_tuple_like():
    text = generate_stringification(Point(1, 2))
    assert text.endswith("Point: [1, 2]")


def test_generate_for_scalars_has_no_prefix():
    assert generate_stringification(12) == "12"
    assert generate_stringification("x") == '"x"'


def test_generate_for_list():
    assert generate_stringification([1, 2]) == "list: [1, 2]"