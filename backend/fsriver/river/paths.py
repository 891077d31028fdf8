"""Dotted-path lookups into nested documents."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from fsriver.core.errors import PathTypeMismatch, TypeCoercionFailure


def extract_raw_values(path: str, document: Mapping[str, Any]) -> list[Any]:
    """Collect every value addressed by ``path`` (e.g. ``"fs.update_rate"``).

    Missing keys and ``null`` values yield nothing. Lists met along the way
    are walked element by element and a list at the leaf is flattened into
    the result. A scalar where a mapping is needed raises
    :class:`PathTypeMismatch`.
    """
    values: list[Any] = []
    _extract(path, path.split("."), document, values)
    return values


def _extract(path: str, segments: Sequence[str], node: Any, values: list[Any]) -> None:
    if node is None:
        return
    if not segments:
        if isinstance(node, list):
            values.extend(item for item in node if item is not None)
        else:
            values.append(node)
        return
    if isinstance(node, Mapping):
        head = segments[0]
        if head in node:
            _extract(path, segments[1:], node[head], values)
        return
    if isinstance(node, list):
        for item in node:
            _extract(path, segments, item, values)
        return
    raise PathTypeMismatch(path, segments[0], node)


def first_value(path: str, document: Mapping[str, Any]) -> tuple[Any, list[Any]]:
    """Return the authoritative (first) value and any values dropped after it."""
    values = extract_raw_values(path, document)
    if not values:
        return None, []
    return values[0], values[1:]


def get_single_string_value(path: str, document: Mapping[str, Any]) -> str | None:
    value, _ = first_value(path, document)
    if value is None or isinstance(value, str):
        return value
    raise TypeCoercionFailure(path, "a string", value)


def get_single_int_value(path: str, document: Mapping[str, Any]) -> int | None:
    value, _ = first_value(path, document)
    if value is None:
        return None
    if isinstance(value, bool):
        raise TypeCoercionFailure(path, "an integer", value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise TypeCoercionFailure(path, "an integer", value)


def get_single_bool_value(path: str, document: Mapping[str, Any]) -> bool | None:
    value, _ = first_value(path, document)
    if value is None or isinstance(value, bool):
        return value
    raise TypeCoercionFailure(path, "a boolean", value)


__all__ = [
    "extract_raw_values",
    "first_value",
    "get_single_string_value",
    "get_single_int_value",
    "get_single_bool_value",
]
