"""Index mapping for documents produced by an FS river."""

from __future__ import annotations

from typing import Any

from fsriver.core.config import Settings, get_settings
from fsriver.models.entities import FSRiver
from fsriver.river.codec import dumps

DATE_FORMAT = "dateOptionalTime"


def _keyword() -> dict[str, str]:
    return {"type": "string", "analyzer": "keyword"}


def _date() -> dict[str, str]:
    return {"type": "date", "format": DATE_FORMAT}


def build_schema(type_name: str, analyzer: str) -> dict[str, Any]:
    """Mapping for ``type_name`` with file content analyzed by ``analyzer``.

    Consumers rely on the exact field names and flags below.
    """
    return {
        type_name: {
            "properties": {
                "file": {
                    "type": "attachment",
                    "path": "full",
                    "fields": {
                        "file": {
                            "type": "string",
                            "store": "yes",
                            "term_vector": "with_positions_offsets",
                            "analyzer": analyzer,
                        },
                        "author": {"type": "string"},
                        "title": {"type": "string", "store": "yes"},
                        "name": {"type": "string"},
                        "date": _date(),
                        "keywords": {"type": "string"},
                        "content_type": {"type": "string"},
                    },
                },
                "name": _keyword(),
                "pathEncoded": _keyword(),
                "postDate": _date(),
                "rootpath": _keyword(),
                "virtualpath": _keyword(),
            }
        }
    }


def build_schema_json(type_name: str, analyzer: str) -> bytes:
    return dumps(build_schema(type_name, analyzer))


def build_river_schema(river: FSRiver, settings: Settings | None = None) -> dict[str, Any]:
    """Mapping for the document type a river writes to.

    The mapping is keyed by ``river.typename`` (falling back to
    ``settings.default_typename``), not by ``river.indexname``: a mapping
    belongs to a document type, so callers that used to pass the index name
    here now get the type name instead.
    """
    settings = settings or get_settings()
    return build_schema(
        river.typename or settings.default_typename,
        river.analyzer or settings.default_analyzer,
    )


__all__ = ["build_schema", "build_schema_json", "build_river_schema"]
