"""Internal dataclasses representing river definitions."""

from __future__ import annotations

from dataclasses import dataclass

FS_RIVER_TYPE = "fs"


@dataclass(slots=True)
class FSRiver:
    """A recurring filesystem crawl feeding one index.

    ``update_rate`` is expressed in seconds; the document form carries
    milliseconds. ``includes`` and ``excludes`` hold comma-separated globs.
    """

    id: str | None = None
    name: str | None = None
    url: str | None = None
    update_rate: int | None = None
    includes: str | None = None
    excludes: str | None = None
    analyzer: str | None = None
    indexname: str | None = None
    typename: str | None = None

    @property
    def type(self) -> str:
        return FS_RIVER_TYPE

    def include_patterns(self) -> list[str]:
        return _split_patterns(self.includes)

    def exclude_patterns(self) -> list[str]:
        return _split_patterns(self.excludes)


def _split_patterns(value: str | None) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


__all__ = ["FSRiver", "FS_RIVER_TYPE"]
