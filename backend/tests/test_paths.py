"""Tests for dotted-path resolution."""

import pytest

from fsriver.core.errors import PathTypeMismatch, TypeCoercionFailure
from fsriver.river.paths import (
    extract_raw_values,
    first_value,
    get_single_bool_value,
    get_single_int_value,
    get_single_string_value,
)


def test_missing_path_yields_nothing() -> None:
    assert extract_raw_values("a.b.c", {"a": {}}) == []
    assert extract_raw_values("x", {}) == []


def test_leaf_values_and_lists() -> None:
    doc = {"fs": {"name": "tmp", "includes": ["*.doc", "*.pdf"]}}
    assert extract_raw_values("fs.name", doc) == ["tmp"]
    assert extract_raw_values("fs.includes", doc) == ["*.doc", "*.pdf"]


def test_lists_are_walked_mid_path() -> None:
    doc = {"rivers": [{"name": "a"}, {"other": 1}, {"name": "b"}]}
    assert extract_raw_values("rivers.name", doc) == ["a", "b"]


def test_null_is_treated_as_absent() -> None:
    assert extract_raw_values("index.index", {"index": None}) == []
    assert extract_raw_values("fs.name", {"fs": {"name": None}}) == []
    assert extract_raw_values("fs.includes", {"fs": {"includes": [None, "*.pdf", None]}}) == ["*.pdf"]
    assert extract_raw_values("rivers.name", {"rivers": [None, {"name": "a"}]}) == ["a"]


def test_scalar_mid_path_is_reported() -> None:
    with pytest.raises(PathTypeMismatch) as info:
        extract_raw_values("fs.url.host", {"fs": {"url": "/tmp"}})
    assert info.value.path == "fs.url.host"
    assert info.value.segment == "host"
    assert isinstance(info.value, TypeCoercionFailure)


def test_first_value_reports_dropped() -> None:
    value, dropped = first_value("fs.includes", {"fs": {"includes": ["a", "b", "c"]}})
    assert value == "a"
    assert dropped == ["b", "c"]
    assert first_value("fs.includes", {}) == (None, [])


def test_typed_getters() -> None:
    doc = {"fs": {"name": "tmp", "update_rate": 1500, "json": True, "ratio": 2.0}}
    assert get_single_string_value("fs.name", doc) == "tmp"
    assert get_single_string_value("fs.url", doc) is None
    assert get_single_int_value("fs.update_rate", doc) == 1500
    assert get_single_int_value("fs.ratio", doc) == 2
    assert get_single_bool_value("fs.json", doc) is True
    assert get_single_bool_value("fs.missing", doc) is None


@pytest.mark.parametrize(
    ("getter", "value"),
    [
        (get_single_string_value, 12),
        (get_single_int_value, "30000"),
        (get_single_int_value, True),
        (get_single_int_value, 1.5),
        (get_single_bool_value, "yes"),
    ],
)
def test_typed_getters_reject_wrong_kind(getter, value) -> None:
    with pytest.raises(TypeCoercionFailure):
        getter("fs.value", {"fs": {"value": value}})
