"""FastAPI application setup for fsriver."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fsriver.api.dependencies import get_app_settings
from fsriver.api.routes_rivers import router as rivers_router
from fsriver.core.errors import DecodeError, RiverError, SerializationFault
from fsriver.core.logging import configure_logging, get_logger
from fsriver.models.dto import ErrorResponse

logger = get_logger(__name__)

app = FastAPI(
    title="FS River",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.include_router(rivers_router, prefix="/rivers", tags=["rivers"])


@app.on_event("startup")
async def startup() -> None:
    """Apply logging settings on startup."""
    settings = get_app_settings()
    configure_logging(settings.log_level, use_json=settings.log_json)


@app.exception_handler(DecodeError)
async def decode_error_handler(_request: Request, exc: DecodeError) -> JSONResponse:
    return _error_response(422, exc)


@app.exception_handler(SerializationFault)
async def serialization_fault_handler(_request: Request, exc: SerializationFault) -> JSONResponse:
    logger.error("Serialization fault: %s", exc)
    return _error_response(500, exc)


def _error_response(status_code: int, exc: RiverError) -> JSONResponse:
    body = ErrorResponse(**exc.to_dict())
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.get("/health", tags=["admin"])
def health() -> dict[str, bool]:
    """Simple liveness check."""
    return {"ok": True}
