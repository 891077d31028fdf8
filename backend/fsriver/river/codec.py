"""Translate between FS river definitions and their JSON document form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

import orjson

from fsriver.core.config import Settings, get_settings
from fsriver.core.errors import (
    DecodeError,
    InvalidDiscriminator,
    MissingRequiredField,
    MissingSection,
    SerializationFault,
    TypeCoercionFailure,
)
from fsriver.core.logging import get_logger
from fsriver.models.entities import FS_RIVER_TYPE, FSRiver
from fsriver.river.paths import first_value, get_single_int_value, get_single_string_value
from fsriver.utils.time import millis_to_seconds, seconds_to_millis

logger = get_logger(__name__)

UPDATE_RATE_PATH = f"{FS_RIVER_TYPE}.update_rate"


@dataclass(slots=True)
class DecodeResult:
    """Outcome of a decode: either ``river`` or ``error`` is set.

    ``partial`` always holds whatever was decoded before the first failure.
    """

    river: FSRiver | None
    error: DecodeError | None
    partial: FSRiver

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> FSRiver:
        if self.error is not None:
            raise self.error
        return self.partial


def decode_result(document: Mapping[str, Any]) -> DecodeResult:
    """Decode ``document`` without raising :class:`DecodeError`."""
    river = FSRiver()
    try:
        _decode_into(river, document)
    except DecodeError as exc:
        return DecodeResult(river=None, error=exc, partial=river)
    return DecodeResult(river=river, error=None, partial=river)


def decode(document: Mapping[str, Any]) -> FSRiver:
    """Build an FS river from a document such as::

        {
          "type": "fs",
          "fs": {
            "name": "tmp",
            "url": "/tmp_es",
            "update_rate": 30000,
            "includes": "*.doc,*.pdf",
            "excludes": "resume.*",
            "analyzer": "standard"
          },
          "index": {"index": "docs", "type": "doc"}
        }

    Raises the specific :class:`DecodeError` subclass on the first problem.
    """
    river = decode_result(document).unwrap()
    logger.debug("Decoded river", extra={"ctx_river": river.id})
    return river


def decode_lenient(document: Mapping[str, Any]) -> FSRiver:
    """Best-effort decode returning whatever was read before a failure."""
    result = decode_result(document)
    if result.error is not None:
        logger.warning(
            "Partial river decode: %s",
            result.error,
            extra={"ctx_kind": result.error.kind, "ctx_river": result.partial.id},
        )
    return result.partial


def decode_document(document: Mapping[str, Any], settings: Settings | None = None) -> FSRiver:
    """Decode using the configured ``decode_mode``."""
    settings = settings or get_settings()
    if settings.decode_mode == "lenient":
        return decode_lenient(document)
    return decode(document)


def _decode_into(river: FSRiver, document: Mapping[str, Any]) -> None:
    if not isinstance(document, Mapping):
        raise TypeCoercionFailure("$", "a mapping", document)
    if "type" not in document:
        raise InvalidDiscriminator()
    discriminator = document["type"]
    if not isinstance(discriminator, str) or discriminator.lower() != FS_RIVER_TYPE:
        raise InvalidDiscriminator(discriminator)

    if FS_RIVER_TYPE not in document:
        raise MissingSection(FS_RIVER_TYPE)
    if not isinstance(document[FS_RIVER_TYPE], Mapping):
        raise TypeCoercionFailure(FS_RIVER_TYPE, "a mapping", document[FS_RIVER_TYPE])

    name = get_single_string_value("fs.name", document)
    river.id = name
    river.name = name
    river.url = get_single_string_value("fs.url", document)

    update_rate = get_single_int_value(UPDATE_RATE_PATH, document)
    if update_rate is None:
        raise MissingRequiredField(UPDATE_RATE_PATH)
    if update_rate < 0:
        raise TypeCoercionFailure(UPDATE_RATE_PATH, "a non-negative integer", update_rate)
    river.update_rate = millis_to_seconds(update_rate)

    river.includes = _first_string("fs.includes", document)
    river.excludes = _first_string("fs.excludes", document)
    river.analyzer = get_single_string_value("fs.analyzer", document)

    if "index" in document:
        river.indexname = get_single_string_value("index.index", document)
        river.typename = get_single_string_value("index.type", document)


def _first_string(path: str, document: Mapping[str, Any]) -> str | None:
    value, dropped = first_value(path, document)
    if dropped:
        logger.warning(
            "Only the first %s pattern is honored, ignoring %s",
            path,
            dropped,
            extra={"ctx_path": path},
        )
    if value is None or isinstance(value, str):
        return value
    raise TypeCoercionFailure(path, "a string", value)


def encode(river: FSRiver) -> dict[str, Any]:
    """Build the canonical document for ``river``; key order is fixed."""
    document = {
        "type": river.type,
        river.type: {
            "name": river.id,
            "url": river.url,
            "update_rate": seconds_to_millis(river.update_rate),
            "includes": river.includes,
            "excludes": river.excludes,
            "analyzer": river.analyzer,
        },
        "index": {
            "index": river.indexname,
            "type": river.typename,
        },
    }
    logger.debug("Encoded river", extra={"ctx_river": river.id})
    return document


def encode_json(river: FSRiver) -> bytes:
    return dumps(encode(river))


def dumps(document: Mapping[str, Any], indent: bool = False) -> bytes:
    """Serialize a document with orjson, preserving key order."""
    option = orjson.OPT_INDENT_2 if indent else 0
    try:
        return orjson.dumps(document, option=option)
    except (orjson.JSONEncodeError, TypeError) as exc:
        logger.error("Failed to serialize document: %s", exc)
        raise SerializationFault(str(exc)) from exc


__all__ = [
    "DecodeResult",
    "decode",
    "decode_result",
    "decode_lenient",
    "decode_document",
    "encode",
    "encode_json",
    "dumps",
]
