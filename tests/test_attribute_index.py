from dataclasses import dataclass
from typing import Optional

import pytest

from molecules.errors import DuplicateKeyError
from molecules.library import AttributeIndex


@dataclass(frozen=True)
class Item:
    code: Optional[str]
    label: str


ITEMS = (Item("a", "alpha"), Item("b", "beta"), Item(None, "gamma"))


def test_build_by_attribute_name():
    index = AttributeIndex.build(ITEMS, "label")
    assert len(index) == 3
    for item in ITEMS:
        assert index[item.label] is item


def test_build_by_callable():
    index = AttributeIndex.build(ITEMS, lambda item: item.label.upper())
    assert index["BETA"] is ITEMS[1]


def test_none_keys_are_excluded():
    index = AttributeIndex.build(ITEMS, "code")
    assert list(index) == ["a", "b"]
    assert None not in index


def test_lookup_missing_key_returns_none():
    index = AttributeIndex.build(ITEMS, "code")
    assert index.lookup("z") is None
    assert index.lookup("a") is ITEMS[0]
    assert index.get("z") is None


def test_duplicate_keys_are_rejected():
    first, second = Item("a", "alpha"), Item("a", "aleph")
    with pytest.raises(DuplicateKeyError) as excinfo:
        AttributeIndex.build([first, Item("b", "beta"), second], "code")
    assert excinfo.value.key == "a"
    assert excinfo.value.first is first
    assert excinfo.value.second is second


def test_invalid_accessor():
    with pytest.raises(TypeError):
        AttributeIndex.build(ITEMS, 3)


def test_lookup_unhashable_key_returns_none():
    index = AttributeIndex.build(ITEMS, "code")
    assert index.lookup(["a"]) is None
