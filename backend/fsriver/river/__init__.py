"""FS river translation components."""

from .codec import (
    DecodeResult,
    decode,
    decode_document,
    decode_lenient,
    decode_result,
    dumps,
    encode,
    encode_json,
)
from .mapping import build_river_schema, build_schema, build_schema_json
from .paths import extract_raw_values

__all__ = [
    "DecodeResult",
    "decode",
    "decode_document",
    "decode_lenient",
    "decode_result",
    "dumps",
    "encode",
    "encode_json",
    "build_river_schema",
    "build_schema",
    "build_schema_json",
    "extract_raw_values",
]
