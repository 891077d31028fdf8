"""Pydantic DTOs exposed via API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from fsriver.models.entities import FSRiver


class RiverPayload(BaseModel):
    id: str | None = None
    name: str | None = None
    url: str | None = None
    update_rate: int | None = Field(default=None, ge=0, description="Update interval in seconds")
    includes: str | None = None
    excludes: str | None = None
    analyzer: str | None = None
    indexname: str | None = None
    typename: str | None = None

    @classmethod
    def from_river(cls, river: FSRiver) -> "RiverPayload":
        return cls(
            id=river.id,
            name=river.name,
            url=river.url,
            update_rate=river.update_rate,
            includes=river.includes,
            excludes=river.excludes,
            analyzer=river.analyzer,
            indexname=river.indexname,
            typename=river.typename,
        )

    def to_river(self) -> FSRiver:
        return FSRiver(**self.model_dump())


class DecodeResponse(BaseModel):
    river: RiverPayload
    partial: bool = False
    error: dict[str, str] | None = None


class ErrorResponse(BaseModel):
    kind: str
    message: str


__all__ = ["RiverPayload", "DecodeResponse", "ErrorResponse"]
