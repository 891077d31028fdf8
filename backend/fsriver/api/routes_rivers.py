"""River translation routes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response

from fsriver.api.dependencies import get_app_settings
from fsriver.core.config import Settings
from fsriver.models.dto import DecodeResponse, ErrorResponse, RiverPayload
from fsriver.river import build_schema_json, decode_result, encode_json

router = APIRouter()

JSON_MEDIA_TYPE = "application/json"


@router.post(
    "/decode",
    response_model=DecodeResponse,
    responses={422: {"model": ErrorResponse}},
    summary="Decode a river document",
)
async def decode_river(
    document: dict[str, Any] = Body(...),
    lenient: bool | None = Query(None, description="Return a partial river instead of failing"),
    settings: Settings = Depends(get_app_settings),
) -> DecodeResponse:
    if lenient is None:
        lenient = settings.decode_mode == "lenient"
    result = decode_result(document)
    if result.error is None:
        return DecodeResponse(river=RiverPayload.from_river(result.partial))
    if not lenient:
        raise result.error
    return DecodeResponse(
        river=RiverPayload.from_river(result.partial),
        partial=True,
        error=result.error.to_dict(),
    )


# orjson bytes keep the canonical key order and surface SerializationFault.
@router.post(
    "/encode",
    responses={500: {"model": ErrorResponse}},
    summary="Encode a river into its document form",
)
async def encode_river(payload: RiverPayload) -> Response:
    return Response(content=encode_json(payload.to_river()), media_type=JSON_MEDIA_TYPE)


@router.get(
    "/schema/{type_name}",
    responses={500: {"model": ErrorResponse}},
    summary="Index mapping for river documents",
)
async def river_schema(
    type_name: str,
    analyzer: str | None = Query(None, description="Analyzer for file content"),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    content = build_schema_json(type_name, analyzer or settings.default_analyzer)
    return Response(content=content, media_type=JSON_MEDIA_TYPE)


__all__ = ["router"]
