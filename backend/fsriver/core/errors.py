"""Error taxonomy for river translation."""

from __future__ import annotations

from typing import Any


class RiverError(Exception):
    """Base class for all translation errors."""

    kind = "river_error"

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind, "message": str(self)}


class DecodeError(RiverError):
    """Raised when a raw document cannot be turned into a river."""

    kind = "decode_error"


class InvalidDiscriminator(DecodeError):
    kind = "invalid_discriminator"

    def __init__(self, value: Any = None) -> None:
        self.value = value
        if value is None:
            message = 'Your river document should contain "type":"fs"'
        else:
            message = f'Your FS river document should contain "type":"fs", got {value!r}'
        super().__init__(message)


class MissingSection(DecodeError):
    kind = "missing_section"

    def __init__(self, section: str) -> None:
        self.section = section
        super().__init__(f'A FS river must contain "{section}":{{...}}')


class MissingRequiredField(DecodeError):
    kind = "missing_required_field"

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Missing required field {path!r}")


class TypeCoercionFailure(DecodeError):
    kind = "type_coercion_failure"

    def __init__(self, path: str, expected: str, value: Any) -> None:
        self.path = path
        self.expected = expected
        self.value = value
        super().__init__(f"{path!r} should be {expected}, got {type(value).__name__} {value!r}")


class PathTypeMismatch(TypeCoercionFailure):
    """An intermediate path segment resolved to a scalar."""

    kind = "path_type_mismatch"

    def __init__(self, path: str, segment: str, value: Any) -> None:
        super().__init__(path, "a mapping", value)
        self.segment = segment


class SerializationFault(RiverError):
    """The document could not be serialized."""

    kind = "serialization_fault"


__all__ = [
    "RiverError",
    "DecodeError",
    "InvalidDiscriminator",
    "MissingSection",
    "MissingRequiredField",
    "TypeCoercionFailure",
    "PathTypeMismatch",
    "SerializationFault",
]
