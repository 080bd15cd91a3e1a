from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any

import pytest

from htmlattrs import attribute_bag
from htmlattrs.attributes import render


class Key(str, Enum):
    ID = "id"


class BackedInteger(IntEnum):
    VALUE = 1


def test_get_returns_existing_value_or_default() -> None:
    assert attribute_bag.get({"role": "button"}, "role") == "button"
    assert attribute_bag.get({"id": "submit"}, "type", "button") == "button"
    assert attribute_bag.get({"id": "submit"}, Key.ID) == "submit"


@pytest.mark.parametrize("key", ["", BackedInteger.VALUE])
def test_invalid_keys_raise(key: Any) -> None:
    with pytest.raises(ValueError):
        attribute_bag.get({}, key)
    with pytest.raises(ValueError):
        attribute_bag.set({}, key, "x")


@pytest.mark.parametrize("values", [{"": "value"}, {1: "value"}])
def test_set_many_rejects_bad_keys(values: dict[Any, Any]) -> None:
    with pytest.raises(ValueError):
        attribute_bag.set_many({}, values)


def test_merge_overrides_existing_keys_and_keeps_none() -> None:
    bag = {"class": "btn", "id": "submit"}
    attribute_bag.merge(bag, {"class": "btn btn-primary", "title": "Submit", "role": None})
    assert bag == {"class": "btn btn-primary", "id": "submit", "title": "Submit", "role": None}


def test_remove_existing_and_missing_keys() -> None:
    bag = {"id": "submit", "role": "button"}
    attribute_bag.remove(bag, "id")
    attribute_bag.remove(bag, "missing")
    assert bag == {"role": "button"}


def test_set_keeps_raw_values() -> None:
    supplier = lambda: "submit"  # noqa: E731
    bag: dict[str, Any] = {}
    attribute_bag.set(bag, "id", supplier)
    attribute_bag.add(bag, "aria-hidden", True)
    attribute_bag.set(bag, "type", Key.ID)
    assert bag == {"id": supplier, "aria-hidden": True, "type": Key.ID}


def test_set_none_removes_key() -> None:
    bag = {"data-toggle": "modal", "id": "trigger"}
    attribute_bag.set(bag, "data-toggle", None)
    assert bag == {"id": "trigger"}


def test_set_many_then_render() -> None:
    bag = {"id": "button"}
    attribute_bag.set_many(
        bag,
        {"id": lambda: "submit", "title": "Send form", "disabled": None, "onclick": "go()"},
    )
    assert render(bag) == ' id="submit" title="Send form" onclick="go()"'
